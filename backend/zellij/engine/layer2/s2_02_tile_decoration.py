"""S2.02 — Tile Decoration.

For every tile, in tile order: match a filler cluster by signature, place it on
the tile's matched edge, map it into the canvas and colour each shape.
Random draws per tile: start vertex, cluster choice (only when matched), then
two per shimmered shape. Unmatched tiles are left bare and only counted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from zellij.engine.context import RenderedShape, ZellijContext
from zellij.engine.filler import FillerMatch, match_filler, signature_key, signature_of
from zellij.engine.registry import Layer, stage
from zellij.utils.color import RandomSource, apply_shimmer
from zellij.utils.geometry import Affine, Point, apply_affine_path, compose, match_two_segs

logger = logging.getLogger(__name__)


def render_cluster(
    match: FillerMatch,
    fit: Affine,
    palette: Sequence[str],
    shimmer: int,
    rng: RandomSource,
    shimmer_scale: float = 0.15,
) -> list[RenderedShape]:
    """Canvas-space shapes of a matched cluster, in authoring order."""
    cluster = match.cluster
    placement = compose(fit, match_two_segs(cluster.fv, cluster.fw, match.path[0], match.path[1]))

    shapes: list[RenderedShape] = []
    for shape in cluster.shapes:
        color = palette[min(shape.colour, len(palette) - 1)]
        # Background and accent keep their exact colour.
        if shimmer >= 0 and shape.colour >= 2:
            color = apply_shimmer(color, shimmer, rng, shimmer_scale)

        coords = apply_affine_path(placement, shape.path)
        shapes.append(
            RenderedShape(
                path=[Point(float(x), float(y)) for x, y in coords],
                color=color,
                colour_index=shape.colour,
            )
        )
    return shapes


@stage(
    id="S2.02",
    layer=Layer.DECORATION,
    dependencies=["S1.02", "S2.01"],
    description="Match filler clusters to tiles, place and colour their shapes",
)
def tile_decoration(ctx: ZellijContext) -> None:
    if ctx.fit is None:
        return

    tolerance = ctx.config.corner_tolerance
    for tile in ctx.tiles:
        match = match_filler(tile.path, ctx.library, ctx.rng, tolerance)
        if match is None:
            key = signature_key(signature_of(tile.path, tolerance))
            ctx.unmatched[key] += 1
            logger.debug("No filler for signature %s", key)
            continue

        ctx.shapes.extend(
            render_cluster(
                match,
                ctx.fit,
                ctx.options.palette,
                ctx.options.shimmer,
                ctx.rng,
                ctx.config.shimmer_scale,
            )
        )

    logger.debug(
        "Decorated %d/%d tiles with %d shapes",
        len(ctx.tiles) - sum(ctx.unmatched.values()),
        len(ctx.tiles),
        len(ctx.shapes),
    )
