"""Pipeline orchestrator — runs stages in dependency order over one context."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from zellij.engine.config import EngineConfig
from zellij.engine.context import Features, RenderedShape, RenderOptions, ZellijContext
from zellij.engine.filler import FillerLibrary
from zellij.engine.layer2.s2_01_canvas_fit import target_box
from zellij.engine.registry import StageRegistry, get_registry
from zellij.errors import ZellijError

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ("layer0", "layer1", "layer2")


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire. Safe to call repeatedly."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"zellij.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Runs every registered stage on a context.

    Errors are recorded on the context and re-raised: a generation call either
    completes or fails as a whole.
    """

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: ZellijContext) -> ZellijContext:
        start = time.perf_counter()

        # Fail on an unusable canvas before any random draw.
        target_box(ctx.options.width, ctx.options.height, ctx.config.canvas_margin)

        ordered = self.registry.resolve_order()
        logger.info("Pipeline: %d stages queued (seed %d)", len(ordered), ctx.options.seed)

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except ZellijError as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
                raise
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d tiles, %d shapes, %d undecorated in %.0fms",
            len(ctx.tiles),
            len(ctx.shapes),
            sum(ctx.unmatched.values()),
            total,
        )
        return ctx


def create_pipeline() -> Pipeline:
    """Factory function for a pipeline over the registered stages."""
    register_stages()
    return Pipeline()


def build_design(
    options: RenderOptions,
    library: FillerLibrary,
    *,
    config: EngineConfig | None = None,
    features: Features | None = None,
) -> ZellijContext:
    """Run a full generation call and return its context for inspection."""
    ctx = ZellijContext(
        options=options,
        library=library,
        config=config or EngineConfig(),
        forced_features=features,
    )
    return create_pipeline().run(ctx)


def generate_zellij(
    options: RenderOptions,
    library: FillerLibrary,
    *,
    config: EngineConfig | None = None,
    features: Features | None = None,
) -> list[RenderedShape]:
    """Coloured canvas-space polygons for ``options``, in drawing order."""
    return build_design(options, library, config=config, features=features).shapes
