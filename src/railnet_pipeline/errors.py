"""Error types raised while turning rail geodata into a plane network."""

from __future__ import annotations


class RailNetworkError(ValueError):
    """Base class for errors scoped to a single station or edge record."""


class OutOfBounds(RailNetworkError):
    """A coordinate lies outside the supported geographic box."""

    def __init__(self, lon: float, lat: float, bounds: tuple[float, float, float, float] | None = None):
        self.lon = lon
        self.lat = lat
        self.bounds = bounds
        message = f"Coordinate (lon={lon}, lat={lat}) is outside the supported box"
        if bounds is not None:
            min_lon, max_lon, min_lat, max_lat = bounds
            message += f" lon [{min_lon}, {max_lon}], lat [{min_lat}, {max_lat}]"
        super().__init__(message)


class DegenerateInterval(RailNetworkError):
    """Normalization was asked to map a zero-width interval."""

    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end
        super().__init__(f"Cannot normalize over zero-width interval [{start}, {end}]")


class MalformedShape(RailNetworkError):
    """A record or geo-shape could not be read."""

    def __init__(self, detail: str, index: int | None = None):
        self.detail = detail
        self.index = index
        prefix = f"Record {index}: " if index is not None else ""
        super().__init__(prefix + detail)


class InvalidElevation(RailNetworkError):
    """An elevation is NaN or infinite and cannot be scaled onto the grid."""

    def __init__(self, lon: float, lat: float, elevation: float):
        self.lon = lon
        self.lat = lat
        self.elevation = elevation
        super().__init__(f"Coordinate (lon={lon}, lat={lat}) has non-finite elevation {elevation}")
