"""In-memory network of built lines and station points."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import Line, PlanePoint, StationTag


class Network(BaseModel):
    """Lines and standalone points in insertion order.

    ``point_tags[i]`` describes ``points[i]``. Only ``add_line`` and
    ``add_point`` mutate it, from a single producer.
    """

    lines: list[Line] = Field(default_factory=list)
    points: list[PlanePoint] = Field(default_factory=list)
    point_tags: list[StationTag] = Field(default_factory=list)

    def add_line(self, line: Line) -> None:
        self.lines.append(line)

    def add_point(self, point: PlanePoint, tag: StationTag | None = None) -> None:
        self.points.append(point)
        self.point_tags.append(tag or StationTag())

    def line_count(self) -> int:
        return len(self.lines)

    def point_count(self) -> int:
        return len(self.points)

    def vertex_count(self) -> int:
        return sum(len(line.points) for line in self.lines)


def new_network() -> Network:
    return Network()
