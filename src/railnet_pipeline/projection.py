"""Projection of geographic coordinates onto a fixed integer grid.

The supported box is mapped onto a ``grid_size`` x ``grid_size`` square::

    52 Y(lat)  -> y = 0
       |
       |
    40 |------------X(lon)  -> y = grid_size
       -7           10
       x = 0        x = grid_size

Longitude and latitude are normalized independently. One degree of longitude
is shorter than one degree of latitude at these latitudes and the grid does
not correct for it, so the result is an approximation rather than a
distance-preserving projection.
"""

from __future__ import annotations

import math

from .config import ProjectionConfig
from .errors import DegenerateInterval, InvalidElevation, OutOfBounds
from .models import PlanePoint


def adjust_factor(value: float, factor: float) -> int:
    """Scale ``value`` by ``factor`` and truncate toward zero."""
    return int(value * factor)


def normalize(start: int, end: int, size: int, pos: int) -> int:
    """Map ``pos`` from the interval ``[start, end]`` onto ``[0, size]``.

    ``start`` maps to 0 and ``end`` maps to ``size`` whichever bound is larger.
    A descending interval is handled by swapping the bounds and mirroring
    ``pos`` inside them, so the output never goes negative. The result is
    truncated, not rounded.

    Raises:
        DegenerateInterval: if ``start == end``.
    """
    if start == end:
        raise DegenerateInterval(start, end)

    low, high, p = start, end, pos
    if end < start:
        low, high = end, start
        p = end - pos + start

    delta = float(high) - float(low)
    delta_pos = float(p) - float(low)
    return int(delta_pos * size / delta)


class Projector:
    """Projects ``(lon, lat, elevation)`` triples with a fixed configuration."""

    def __init__(self, config: ProjectionConfig | None = None):
        self.config = config or ProjectionConfig()
        bounds = self.config.bounds
        factor = self.config.precision
        # Latitude bounds are stored max first: y grows as latitude falls.
        self._lon_bounds = (adjust_factor(bounds.min_lon, factor), adjust_factor(bounds.max_lon, factor))
        self._lat_bounds = (adjust_factor(bounds.max_lat, factor), adjust_factor(bounds.min_lat, factor))

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    def project(self, lon: float, lat: float, elevation: float = 0.0) -> PlanePoint:
        """Return the plane point for a geographic coordinate.

        Raises:
            OutOfBounds: if ``lon``/``lat`` fall outside the configured box.
            InvalidElevation: if ``elevation`` is NaN or infinite.
        """
        bounds = self.config.bounds
        if not bounds.contains(lon, lat):
            raise OutOfBounds(lon, lat, bounds.as_tuple())
        if not math.isfinite(elevation):
            raise InvalidElevation(lon, lat, elevation)

        factor = self.config.precision
        size = self.config.grid_size
        x = normalize(*self._lon_bounds, size, adjust_factor(lon, factor))
        y = normalize(*self._lat_bounds, size, adjust_factor(lat, factor))
        z = int(abs(elevation / 100.0))
        return PlanePoint(x=x, y=y, z=z)


_default_projector = Projector()


def project(lon: float, lat: float, elevation: float = 0.0) -> PlanePoint:
    """Project with the default 1300-unit grid and bounding box."""
    return _default_projector.project(lon, lat, elevation)
