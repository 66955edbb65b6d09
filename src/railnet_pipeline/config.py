"""Pydantic configuration models for the network pipeline."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BoundingBox(BaseModel):
    """Geographic box the projector accepts, in degrees."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_lon: float = -7.0
    max_lon: float = 10.0
    min_lat: float = 40.0
    max_lat: float = 52.0

    @model_validator(mode="after")
    def _check_extent(self) -> "BoundingBox":
        if self.min_lon >= self.max_lon or self.min_lat >= self.max_lat:
            raise ValueError("bounding box must have a positive extent on both axes")
        return self

    def contains(self, lon: float, lat: float) -> bool:
        # NaN fails both comparisons
        return self.min_lon <= lon <= self.max_lon and self.min_lat <= lat <= self.max_lat

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.min_lon, self.max_lon, self.min_lat, self.max_lat


class ProjectionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    grid_size: int = Field(1300, gt=0)
    precision: float = Field(100_000.0, gt=0)  # scale applied to degrees before truncation
    bounds: BoundingBox = Field(default_factory=BoundingBox)


class SimplifyConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = True
    max_angle_deg: float = Field(5.0, ge=0, le=180)
    max_distance: float = Field(1.0, ge=0)  # grid units


class NetworkConfig(BaseModel):
    """Top-level settings for ``build_network``."""

    model_config = ConfigDict(extra="forbid")

    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)
    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    strict: bool = False
    passenger_stations_only: bool = False


def load_config(path: str | Path) -> NetworkConfig:
    """Read a ``NetworkConfig`` from a JSON file."""
    return NetworkConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))
