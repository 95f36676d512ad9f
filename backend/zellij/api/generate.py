"""POST /api/generate — run the pattern pipeline and return its shapes."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from zellij.config import Settings
from zellij.dependencies import get_library, get_settings
from zellij.engine.context import Features, Focus, RenderOptions
from zellij.engine.filler import FillerLibrary
from zellij.engine.pipeline import build_design
from zellij.models.requests import GenerateRequest
from zellij.models.responses import FeaturesModel, GenerateResponse, ShapeModel
from zellij.palettes import DEFAULT_PALETTE, get_palette

router = APIRouter()


def _forced_features(req: GenerateRequest) -> Features | None:
    if req.density is None or req.num_lines is None:
        return None
    return Features(density=req.density, num_lines=req.num_lines, focus=req.focus or Focus.NONE)


@router.post("/generate", response_model=GenerateResponse)
def generate(
    req: GenerateRequest,
    library: FillerLibrary = Depends(get_library),
    settings: Settings = Depends(get_settings),
) -> GenerateResponse:
    start = time.perf_counter()

    seed = req.seed if req.seed is not None else int(time.time() * 1000)
    palette = req.palette if req.palette is not None else get_palette(req.palette_name or DEFAULT_PALETTE)

    options = RenderOptions(
        seed=seed,
        width=req.width,
        height=req.height,
        palette=palette,
        shimmer=req.shimmer,
    )
    ctx = build_design(
        options,
        library,
        config=settings.engine_config(),
        features=_forced_features(req),
    )

    elapsed = (time.perf_counter() - start) * 1000

    return GenerateResponse(
        seed=seed,
        background=options.palette[0],
        features=FeaturesModel(
            density=ctx.features.density,
            num_lines=ctx.features.num_lines,
            focus=ctx.features.focus.value,
        ),
        tile_count=len(ctx.tiles),
        unmatched_tiles=dict(ctx.unmatched),
        processing_time_ms=round(elapsed, 1),
        shapes=[
            ShapeModel(
                path=[(p.x, p.y) for p in shape.path],
                color=shape.color,
                colour_index=shape.colour_index,
            )
            for shape in ctx.shapes
        ],
    )
