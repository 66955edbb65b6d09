"""Rail network geometry pipeline: projection, line building, simplification."""

from .builder import build_edge, build_line, build_multi_line
from .config import BoundingBox, NetworkConfig, ProjectionConfig, SimplifyConfig, load_config
from .errors import DegenerateInterval, InvalidElevation, MalformedShape, OutOfBounds, RailNetworkError
from .models import Edge, Line, MultiLine, PlanePoint, RejectedRecord, Segment, Station, StationTag
from .network import Network, new_network
from .pipeline import PipelineResult, build_network
from .projection import Projector, normalize, project
from .reader import read_edges, read_stations
from .segments import compute_segments, geodesic_length_km
from .simplify import simplify_line, simplify_lines
from .writer import write_shapefiles

__all__ = [
    "BoundingBox",
    "DegenerateInterval",
    "Edge",
    "InvalidElevation",
    "Line",
    "MalformedShape",
    "MultiLine",
    "Network",
    "NetworkConfig",
    "OutOfBounds",
    "PipelineResult",
    "PlanePoint",
    "ProjectionConfig",
    "Projector",
    "RailNetworkError",
    "RejectedRecord",
    "Segment",
    "SimplifyConfig",
    "Station",
    "StationTag",
    "build_edge",
    "build_line",
    "build_multi_line",
    "build_network",
    "compute_segments",
    "geodesic_length_km",
    "load_config",
    "new_network",
    "normalize",
    "project",
    "read_edges",
    "read_stations",
    "simplify_line",
    "simplify_lines",
    "write_shapefiles",
]
