"""Filler library file models (JSON on disk → validated records)."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field, RootModel, field_validator


class FillerShapeModel(BaseModel):
    # Flattened x, y pairs in the cluster's authoring frame
    path: list[float] = Field(..., min_length=6)
    colour: int = Field(..., ge=0, validation_alias=AliasChoices("colour", "colourIndex"))

    @field_validator("path")
    @classmethod
    def _even_coordinates(cls, v: list[float]) -> list[float]:
        if len(v) % 2:
            raise ValueError(f"path has an odd number of coordinates ({len(v)})")
        return v


class ClusterModel(BaseModel):
    # Reference edge fv→fw as [x1, y1, x2, y2]
    bounds: list[float] = Field(..., min_length=4, max_length=4)
    shapes: list[FillerShapeModel] = Field(..., min_length=1)


class FillerLibraryModel(RootModel[dict[str, list[ClusterModel]]]):
    pass
