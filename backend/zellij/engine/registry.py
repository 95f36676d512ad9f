"""Stage registry — every pipeline stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.02", layer=Layer.TILING, dependencies=["S1.01"])
    def group_consolidation(ctx: ZellijContext) -> None:
        ctx.tiles = consolidate_groups(ctx.grid, ctx.tiles, ctx.groups)

Adding a new stage = creating one file with the decorator under a layer package.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from zellij.engine.context import ZellijContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    CONSTRUCTION = 0
    TILING = 1
    DECORATION = 2


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["ZellijContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Registry of pipeline stages; the module-level instance is filled at import."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        specs = [s for s in self._stages.values() if s.layer == layer]
        return sorted(specs, key=lambda s: s.id)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Topological sort respecting dependencies, ties broken by id.

        The order fixes the sequence of random draws, so it must be stable.
        """
        pool = self._stages
        if requested_ids is not None:
            # Expand with transitive dependencies
            expanded: set[str] = set()
            stack = list(requested_ids)
            while stack:
                sid = stack.pop()
                if sid in expanded:
                    continue
                expanded.add(sid)
                spec = pool.get(sid)
                if spec:
                    stack.extend(spec.dependencies)
            pool = {k: v for k, v in pool.items() if k in expanded}

        # Kahn's algorithm
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted([sid for sid, d in in_degree.items() if d == 0])
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["ZellijContext"], None]):
        spec = StageSpec(
            id=id,
            layer=layer,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
