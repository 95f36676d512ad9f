"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class PaletteModel(BaseModel):
    name: str
    colors: list[str]


class FeaturesModel(BaseModel):
    density: int
    num_lines: int
    focus: str


class ShapeModel(BaseModel):
    path: list[tuple[float, float]]
    color: str
    colour_index: int


class GenerateResponse(BaseModel):
    seed: int
    background: str
    features: FeaturesModel
    tile_count: int = 0
    unmatched_tiles: dict[str, int] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
    shapes: list[ShapeModel] = Field(default_factory=list)
