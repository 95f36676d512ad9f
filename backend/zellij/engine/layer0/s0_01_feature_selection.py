"""S0.01 — Feature Selection.

Two draws pick the grid density with its line budget, then the focus motif.
Forced features replace the drawn ones but the draws are still consumed, so
every later draw lands on the same value either way.
"""

from __future__ import annotations

import logging

from zellij.engine.config import EngineConfig
from zellij.engine.context import Features, Focus, ZellijContext
from zellij.engine.registry import Layer, stage
from zellij.utils.color import RandomSource

logger = logging.getLogger(__name__)


def select_features(rng: RandomSource, config: EngineConfig | None = None) -> Features:
    config = config or EngineConfig()

    v = rng.random()
    for threshold, density, num_lines in config.density_table:
        if v < threshold:
            break

    v = rng.random()
    for threshold, focus in config.focus_table:
        if v < threshold:
            break

    return Features(density=density, num_lines=num_lines, focus=Focus(focus))


@stage(
    id="S0.01",
    layer=Layer.CONSTRUCTION,
    description="Draw grid density, line budget and focus motif",
)
def feature_selection(ctx: ZellijContext) -> None:
    drawn = select_features(ctx.rng, ctx.config)
    ctx.features = ctx.forced_features or drawn
    logger.debug(
        "Features: density=%d lines=%d focus=%s%s",
        ctx.features.density,
        ctx.features.num_lines,
        ctx.features.focus.value,
        " (forced)" if ctx.forced_features else "",
    )
