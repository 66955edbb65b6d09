"""Build plane lines from line-string and multi-line-string coordinates."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import MalformedShape
from .models import Edge, GeoCoordinate, Line, LineString, MultiLine, MultiLineString
from .projection import Projector
from .segments import geodesic_length_km


def build_line(
    coords: Sequence[GeoCoordinate],
    projector: Projector | None = None,
    code: str = "",
) -> Line:
    """Project each coordinate in order into a ``Line``.

    The first out-of-bounds coordinate raises ``OutOfBounds``; no partial
    line is returned.
    """
    if not coords:
        raise MalformedShape("line string has no coordinates")

    projector = projector or Projector()
    points = [
        projector.project(c[0], c[1], c[2] if len(c) > 2 else 0.0)
        for c in coords
    ]
    return Line(points=points, code=code, length_km=geodesic_length_km(coords))


def build_multi_line(
    parts: Sequence[Sequence[GeoCoordinate]],
    projector: Projector | None = None,
    code: str = "",
) -> list[Line]:
    """Build one line per part, in order. A failing part fails the whole shape."""
    projector = projector or Projector()
    return [build_line(part, projector, code=code) for part in parts]


def build_edge(edge: Edge, projector: Projector | None = None) -> MultiLine:
    """Build an edge record into one line per path fragment of its shape."""
    shape = edge.fields.geo_shape
    if isinstance(shape, LineString):
        return MultiLine(lines=[build_line(shape.coordinates, projector, code=edge.code)])
    if isinstance(shape, MultiLineString):
        return MultiLine(lines=build_multi_line(shape.coordinates, projector, code=edge.code))
    raise MalformedShape(f"Unsupported geo shape: {type(shape).__name__}")
