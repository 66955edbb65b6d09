"""Shapefile export of a built network, in grid coordinates."""

from __future__ import annotations

import logging
from pathlib import Path

import shapefile

from .network import Network

logger = logging.getLogger(__name__)


def write_shapefiles(network: Network, base_path: str | Path) -> list[Path]:
    """Write ``<base>_lines`` (POLYLINEZ) and ``<base>_stations`` (POINTZ).

    A layer is only written when the network holds something for it. Returns
    the base paths (without extension) of the layers written. No .prj is
    written since grid units have no CRS.
    """
    base_path = Path(base_path)
    written: list[Path] = []

    if network.lines:
        lines_path = base_path.with_name(base_path.name + "_lines")
        with shapefile.Writer(str(lines_path), shapeType=shapefile.POLYLINEZ) as w:
            w.field("CODE", "C", size=40)
            w.field("LENGTH_KM", "N", size=12, decimal=3)
            for line in network.lines:
                w.linez([[[p.x, p.y, p.z] for p in line.points]])
                w.record(line.code, line.length_km)
        written.append(lines_path)

    if network.points:
        stations_path = base_path.with_name(base_path.name + "_stations")
        with shapefile.Writer(str(stations_path), shapeType=shapefile.POINTZ) as w:
            w.field("STATION", "N", size=10)
            w.field("LABEL", "C", size=80)
            w.field("VOYAGEURS", "C", size=1)
            for idx, (p, tag) in enumerate(zip(network.points, network.point_tags), start=1):
                w.pointz(p.x, p.y, p.z)
                w.record(idx, tag.label, tag.voyageurs)
        written.append(stations_path)

    logger.info("Wrote %d shapefile layer(s) to %s", len(written), base_path.parent)
    return written
