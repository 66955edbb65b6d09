"""Segment and length measurements for built lines."""

from __future__ import annotations

import math
from collections.abc import Sequence

from pyproj import Geod

from .models import GeoCoordinate, Line, Segment

_GEOD = Geod(ellps="WGS84")


def geodesic_length_km(coords: Sequence[GeoCoordinate]) -> float:
    """Length along the WGS84 ellipsoid of a lon/lat path, in kilometres."""
    if len(coords) < 2:
        return 0.0
    lons = [c[0] for c in coords]
    lats = [c[1] for c in coords]
    return _GEOD.line_length(lons, lats) / 1000


def compute_segments(line: Line, line_index: int = 0) -> list[Segment]:
    """Compute segments between consecutive points with plane length and cumulative distance."""
    segments: list[Segment] = []
    cumulative = 0.0

    for i in range(1, len(line.points)):
        p1, p2 = line.points[i - 1], line.points[i]
        length = math.hypot(p2.x - p1.x, p2.y - p1.y)

        seg = Segment(
            line=line_index,
            code=line.code,
            segment=f"{i} -> {i + 1}",
            start_point=i,
            end_point=i + 1,
            start_x=p1.x,
            start_y=p1.y,
            end_x=p2.x,
            end_y=p2.y,
            start_z=p1.z,
            end_z=p2.z,
            z_change=p2.z - p1.z,
            length=length,
            cumulative_start=cumulative,
            cumulative_end=cumulative + length,
        )
        segments.append(seg)
        cumulative += length

    return segments
