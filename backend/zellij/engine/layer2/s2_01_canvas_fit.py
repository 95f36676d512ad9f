"""S2.01 — Canvas Fit.

Map the bounding box of the outer boundary into the canvas minus its margin.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from zellij.engine.context import ZellijContext
from zellij.engine.registry import Layer, stage
from zellij.errors import ConfigurationError
from zellij.utils.geometry import Affine, Box, Point, bounding_box, fill_box

logger = logging.getLogger(__name__)


def target_box(width: float, height: float, margin: float) -> Box:
    """Canvas area left inside the margin; refuses canvases with no room."""
    box = Box(margin, margin, width - 2 * margin, height - 2 * margin)
    if box.w <= 0 or box.h <= 0:
        raise ConfigurationError(
            f"Canvas {width}x{height} leaves no room inside a {margin} margin"
        )
    return box


def compute_fit(
    boundary_points: Iterable[Point],
    width: float,
    height: float,
    margin: float = 60.0,
    rotate: bool = False,
) -> Affine:
    return fill_box(bounding_box(boundary_points), target_box(width, height, margin), rotate)


@stage(
    id="S2.01",
    layer=Layer.DECORATION,
    dependencies=["S1.01"],
    description="Fit the pattern's bounding box into the canvas",
)
def canvas_fit(ctx: ZellijContext) -> None:
    if not ctx.boundary:
        logger.warning("Seed %d produced no tiles; nothing to fit", ctx.options.seed)
        ctx.fit = None
        return

    ctx.fit = compute_fit(
        ctx.boundary_points,
        ctx.options.width,
        ctx.options.height,
        ctx.config.canvas_margin,
        ctx.config.allow_rotation,
    )
