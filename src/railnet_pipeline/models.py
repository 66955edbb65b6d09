"""Pydantic data models for station/edge records and plane geometry."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# (lon, lat, elevation); elevation may be omitted and then reads as 0.0
GeoCoordinate = Union[tuple[float, float, float], tuple[float, float]]


class PlanePoint(BaseModel):
    """A coordinate projected onto the integer grid."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    z: int = 0


class StationTag(BaseModel):
    """Label and passenger flag kept next to a station point."""

    model_config = ConfigDict(frozen=True)

    label: str = ""
    voyageurs: str = ""


class Line(BaseModel):
    """An ordered path of plane points built from one line string."""

    points: list[PlanePoint] = Field(min_length=1)
    code: str = ""
    length_km: float | None = None

    @property
    def start(self) -> PlanePoint:
        return self.points[0]

    @property
    def end(self) -> PlanePoint:
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)


class MultiLine(BaseModel):
    lines: list[Line]


class StationFields(BaseModel):
    departement: str = ""
    commune: str = ""
    voyageurs: str = ""
    libelle_gare: str = ""
    coordonnees_geographiques: tuple[float, float] | None = None


class Station(BaseModel):
    """A station record; ``coordonnees_geographiques`` is ``[lon, lat]``."""

    fields: StationFields

    @property
    def label(self) -> str:
        return self.fields.libelle_gare

    @property
    def serves_passengers(self) -> bool:
        return self.fields.voyageurs.strip().upper() == "O"


class LineString(BaseModel):
    type: Literal["LineString"]
    coordinates: list[GeoCoordinate]


class MultiLineString(BaseModel):
    type: Literal["MultiLineString"]
    coordinates: list[list[GeoCoordinate]]


GeoShape = Annotated[Union[LineString, MultiLineString], Field(discriminator="type")]


class EdgeFields(BaseModel):
    code_ligne: str = ""
    geo_shape: GeoShape


class Edge(BaseModel):
    """A track edge record carrying one line or multi-line shape."""

    fields: EdgeFields

    @property
    def code(self) -> str:
        return self.fields.code_ligne


class Segment(BaseModel):
    """A segment between two consecutive points of a built line, in grid units."""

    line: int
    code: str = ""
    segment: str
    start_point: int
    end_point: int
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    start_z: int
    end_z: int
    z_change: int
    length: float
    cumulative_start: float
    cumulative_end: float


class RejectedRecord(BaseModel):
    """A station or edge the pipeline skipped, with the reason."""

    kind: Literal["station", "edge"]
    index: int
    code: str = ""
    reason: str
