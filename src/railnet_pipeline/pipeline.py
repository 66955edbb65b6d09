"""Assemble a ``Network`` from station and edge records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from .builder import build_edge
from .config import NetworkConfig
from .errors import MalformedShape, RailNetworkError
from .models import Edge, RejectedRecord, Station, StationTag
from .network import Network, new_network
from .projection import Projector
from .simplify import simplify_lines

logger = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    """Complete result of building a network."""

    network: Network
    rejected: list[RejectedRecord] = Field(default_factory=list)
    vertices_in: int = 0
    vertices_out: int = 0

    @property
    def vertices_dropped(self) -> int:
        return self.vertices_in - self.vertices_out


def build_network(
    stations: Iterable[Station],
    edges: Iterable[Edge],
    config: NetworkConfig | None = None,
) -> PipelineResult:
    """Project stations, build and simplify edges, and collect them into a network.

    Errors raised for a single record are logged and recorded in
    ``PipelineResult.rejected``; with ``config.strict`` the first one is
    re-raised instead.
    """
    config = config or NetworkConfig()
    projector = Projector(config.projection)
    network = new_network()
    result = PipelineResult(network=network)

    for index, station in enumerate(stations):
        if config.passenger_stations_only and not station.serves_passengers:
            continue
        try:
            coords = station.fields.coordonnees_geographiques
            if coords is None:
                raise MalformedShape("station has no coordinates", index=index)
            tag = StationTag(label=station.label, voyageurs=station.fields.voyageurs)
            network.add_point(projector.project(coords[0], coords[1]), tag)
        except RailNetworkError as exc:
            _reject(result, config, "station", index, station.label, exc)

    for index, edge in enumerate(edges):
        try:
            lines = build_edge(edge, projector).lines
        except RailNetworkError as exc:
            _reject(result, config, "edge", index, edge.code, exc)
            continue

        result.vertices_in += sum(len(line.points) for line in lines)
        for line in simplify_lines(lines, config.simplify):
            result.vertices_out += len(line.points)
            network.add_line(line)
        logger.debug("Edge %d (%s): %d line(s)", index, edge.code or "-", len(lines))

    logger.info(
        "Built network: %d lines, %d points, %d/%d vertices kept, %d rejected records",
        network.line_count(),
        network.point_count(),
        result.vertices_out,
        result.vertices_in,
        len(result.rejected),
    )
    return result


def _reject(
    result: PipelineResult,
    config: NetworkConfig,
    kind: str,
    index: int,
    code: str,
    exc: RailNetworkError,
) -> None:
    if config.strict:
        raise exc
    logger.warning("Skipping %s %d (%s): %s", kind, index, code or "-", exc)
    result.rejected.append(RejectedRecord(kind=kind, index=index, code=code, reason=str(exc)))
