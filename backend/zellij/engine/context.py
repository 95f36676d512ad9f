"""ZellijContext — the single mutable state object owned by one generation call.

Construction results → features, lines, groups, grid
Tiling results → tiles, boundary
Decoration results → fit, shapes, unmatched
"""

from __future__ import annotations

import enum
import math
from collections import Counter
from dataclasses import dataclass, field

from shapely.geometry import Polygon

from zellij.engine.config import EngineConfig
from zellij.engine.filler import FillerLibrary
from zellij.engine.grid import NO_GROUP, Grid, Line
from zellij.engine.rng import SeededRandom
from zellij.errors import ConfigurationError
from zellij.utils.color import is_hex_color
from zellij.utils.geometry import Affine, Point

PALETTE_SIZE = 5


class Focus(str, enum.Enum):
    NONE = "None"
    EIGHT = "Eight"
    SIXTEEN = "Sixteen"


@dataclass(frozen=True)
class Features:
    """Discrete generation parameters drawn from the seed."""

    density: int
    num_lines: int
    focus: Focus = Focus.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "focus", Focus(self.focus))
        if self.density < 1 or self.num_lines < 0:
            raise ConfigurationError(
                f"density must be >= 1 and num_lines >= 0, got {self.density}/{self.num_lines}"
            )
        # The carving plans address lines relative to the focus cell.
        if self.focus is Focus.SIXTEEN and self.density < 5:
            raise ConfigurationError(f"Sixteen focus needs density >= 5, got {self.density}")
        if self.focus is Focus.EIGHT and self.density < 2:
            raise ConfigurationError(f"Eight focus needs density >= 2, got {self.density}")

    @property
    def grid_side(self) -> int:
        return 2 * self.density + 1


@dataclass(frozen=True)
class RenderOptions:
    """Immutable caller input for one generation call.

    palette: [background, accent, fill1, fill2, fill3] as '#rrggbb'
    shimmer: -1 disables colour jitter; otherwise the jitter level
    """

    seed: int
    width: float
    height: float
    palette: tuple[str, ...]
    shimmer: int = -1

    def __post_init__(self) -> None:
        object.__setattr__(self, "palette", tuple(self.palette))

        if isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0:
            raise ConfigurationError(f"seed must be a non-negative integer, got {self.seed!r}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")
        if len(self.palette) != PALETTE_SIZE:
            raise ConfigurationError(
                f"palette must have exactly {PALETTE_SIZE} colours, got {len(self.palette)}"
            )
        for colour in self.palette:
            if not is_hex_color(colour):
                raise ConfigurationError(f"palette colour {colour!r} is not #rrggbb")
        if isinstance(self.shimmer, bool) or not isinstance(self.shimmer, int) or self.shimmer < -1:
            raise ConfigurationError(f"shimmer must be -1 or a level >= 0, got {self.shimmer!r}")


@dataclass
class Tile:
    # Grid cell the tile surrounds (first group point for merged tiles)
    vertex: Point
    # Polygon in grid units, in trace winding order
    path: list[Point]
    group: int = NO_GROUP

    @property
    def polygon(self) -> Polygon:
        return Polygon(self.path)


@dataclass(frozen=True)
class RenderedShape:
    path: list[Point]
    color: str
    colour_index: int


@dataclass
class ZellijContext:
    """State flowing through every stage of one generation call."""

    options: RenderOptions
    library: FillerLibrary
    config: EngineConfig = field(default_factory=EngineConfig)
    # Skip the drawn features (the draws are still consumed)
    forced_features: Features | None = None

    rng: SeededRandom = field(init=False)

    # --- Construction ---
    features: Features | None = None
    # Retained lines, in retention order
    lines: list[Line] = field(default_factory=list)
    # Candidates left in the pool after retention
    unused_lines: list[Line] = field(default_factory=list)
    # Focus motif cells, one list of grid points per group
    groups: list[list[Point]] = field(default_factory=list)
    grid: Grid | None = None

    # --- Tiling ---
    tiles: list[Tile] = field(default_factory=list)
    boundary: list[tuple[Point, Point]] = field(default_factory=list)

    # --- Decoration ---
    fit: Affine | None = None
    shapes: list[RenderedShape] = field(default_factory=list)
    # Signature string → number of tiles left undecorated
    unmatched: Counter[str] = field(default_factory=Counter)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = SeededRandom(self.options.seed)

    @property
    def grid_side(self) -> int:
        if self.features is None:
            return 0
        return self.features.grid_side

    @property
    def boundary_points(self) -> list[Point]:
        return [pt for edge in self.boundary for pt in edge]
