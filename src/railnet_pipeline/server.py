"""FastAPI server for building rail networks from uploaded records."""

from __future__ import annotations

import csv
import io
import logging

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from .config import NetworkConfig, ProjectionConfig, SimplifyConfig
from .errors import RailNetworkError
from .models import Segment
from .network import Network
from .pipeline import build_network
from .reader import read_edges, read_stations
from .segments import compute_segments

logger = logging.getLogger(__name__)

app = FastAPI(title="Rail Network Pipeline", version="0.1.0")


@app.post("/network")
async def process_network(
    edges: UploadFile = File(...),
    stations: UploadFile | None = File(None),
    format: str = Query("json", pattern="^(csv|json)$"),
    simplify: bool = Query(True),
    grid_size: int = Query(1300, gt=0),
    strict: bool = Query(False),
):
    """Build a network from uploaded edge (and optionally station) JSON exports.

    Returns the pipeline result as JSON, or the segment table of every line
    as CSV.
    """
    config = NetworkConfig(
        projection=ProjectionConfig(grid_size=grid_size),
        simplify=SimplifyConfig(enabled=simplify),
        strict=strict,
    )

    try:
        edge_records = read_edges(io.BytesIO(await edges.read()), strict=strict)
        station_records = []
        if stations is not None:
            station_records = read_stations(io.BytesIO(await stations.read()), strict=strict)
        result = build_network(station_records, edge_records, config)
    except RailNetworkError as exc:
        logger.warning("Rejected upload: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if format == "json":
        return result

    return _network_to_csv_response(result.network)


def _network_to_csv_response(network: Network) -> StreamingResponse:
    """Convert every line's segments to a streaming CSV response."""
    fieldnames = list(Segment.model_fields)

    def generate():
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=fieldnames)
        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for line_index, line in enumerate(network.lines):
            for seg in compute_segments(line, line_index):
                writer.writerow(seg.model_dump())
                yield buf.getvalue()
                buf.seek(0)
                buf.truncate(0)

    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=network_segments.csv"},
    )
