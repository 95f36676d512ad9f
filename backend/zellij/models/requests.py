"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from zellij.engine.context import Focus


class GenerateRequest(BaseModel):
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Pattern seed; omitted means the current time in milliseconds",
    )
    width: float = Field(default=800, description="Canvas width")
    height: float = Field(default=800, description="Canvas height")
    palette: list[str] | None = Field(
        default=None,
        description="Five #rrggbb colours: background, accent, three fills",
    )
    palette_name: str | None = Field(default=None, description="Name of a bundled palette")
    shimmer: int = Field(default=-1, description="Colour jitter level; -1 disables it")

    # Forcing the features skips their random choice (draws are still consumed)
    density: int | None = Field(default=None, ge=1, le=60)
    num_lines: int | None = Field(default=None, ge=0)
    focus: Focus | None = None

    @model_validator(mode="after")
    def _features_together(self) -> GenerateRequest:
        forced = (self.density, self.num_lines)
        if any(v is not None for v in forced) and not all(v is not None for v in forced):
            raise ValueError("density and num_lines must be given together")
        if self.focus is not None and self.density is None:
            raise ValueError("focus can only be forced together with density and num_lines")
        if self.palette is not None and self.palette_name is not None:
            raise ValueError("give either palette or palette_name, not both")
        return self
