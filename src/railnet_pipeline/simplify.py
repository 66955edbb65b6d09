"""Drop near-collinear interior points from built lines.

The pass walks a line keeping an open segment ``(anchor, last)``. Each next
point ``p`` is compared against the direction ``anchor -> last``: when the
angle between ``anchor -> last`` and ``anchor -> p`` and the distance from
``p`` to the line through ``anchor`` and ``last`` are both within the
thresholds, ``last`` is dropped and ``p`` takes its place. Otherwise ``last``
is kept and becomes the new anchor.

Comparisons are made in the (x, y) plane; elevation is carried but not used.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from .config import SimplifyConfig
from .models import Line, PlanePoint


def _vector(a: PlanePoint, b: PlanePoint) -> tuple[int, int]:
    return b.x - a.x, b.y - a.y


def _dot(u: tuple[int, int], v: tuple[int, int]) -> int:
    return u[0] * v[0] + u[1] * v[1]


def _cross(u: tuple[int, int], v: tuple[int, int]) -> int:
    return u[0] * v[1] - u[1] * v[0]


def angle_between(u: tuple[int, int], v: tuple[int, int]) -> float:
    """Unsigned angle between two vectors in degrees, in ``[0, 180]``.

    Uses ``atan2(|u x v|, u . v)`` so exactly collinear integer vectors give
    exactly zero.
    """
    return math.degrees(math.atan2(abs(_cross(u, v)), _dot(u, v)))


def distance_to_line(anchor: PlanePoint, through: PlanePoint, p: PlanePoint) -> float:
    """Perpendicular distance from ``p`` to the infinite line ``anchor``-``through``."""
    u = _vector(anchor, through)
    norm = math.hypot(*u)
    if norm == 0:
        return math.hypot(*_vector(anchor, p))
    return abs(_cross(u, _vector(anchor, p))) / norm


def is_mergeable(
    anchor: PlanePoint,
    last: PlanePoint,
    p: PlanePoint,
    max_angle_deg: float,
    max_distance: float,
) -> bool:
    """Whether ``last`` can be dropped in favour of extending to ``p``."""
    u = _vector(anchor, last)
    if u == (0, 0):
        return True
    if _dot(u, _vector(last, p)) < 0:
        # path turns back along itself; keep the turning point
        return False
    v = _vector(anchor, p)
    if angle_between(u, v) > max_angle_deg:
        return False
    return distance_to_line(anchor, last, p) <= max_distance


def simplify_line(line: Line, max_angle_deg: float = 5.0, max_distance: float = 1.0) -> Line:
    """Return a copy of ``line`` without its mergeable interior points.

    Start and end points are always kept and order is preserved.
    """
    points = line.points
    if len(points) <= 2:
        return line.model_copy(update={"points": list(points)})

    kept = [points[0]]
    anchor, last = points[0], points[1]
    for p in points[2:]:
        if is_mergeable(anchor, last, p, max_angle_deg, max_distance):
            last = p
        else:
            kept.append(last)
            anchor, last = last, p
    kept.append(last)

    return line.model_copy(update={"points": kept})


def simplify_lines(lines: Iterable[Line], config: SimplifyConfig | None = None) -> list[Line]:
    config = config or SimplifyConfig()
    if not config.enabled:
        return list(lines)
    return [simplify_line(line, config.max_angle_deg, config.max_distance) for line in lines]
