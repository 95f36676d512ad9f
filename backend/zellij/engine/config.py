"""Engine configuration — constants that shape a generation call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Controls fitting, tolerances and the feature distribution."""

    # Blank border kept on every side of the canvas
    canvas_margin: float = 60.0
    # Allow a 90° turn of the pattern when it fits the canvas better
    allow_rotation: bool = False

    # Shared-edge match when stitching a tile onto its neighbour
    align_tolerance: float = 1e-5
    # Dot-product window for L / I corners
    corner_tolerance: float = 1e-4
    # Endpoint match when cancelling seams inside a focus group
    seam_tolerance: float = 1e-4

    # Shimmer intensity per level (level 4 → ±0.30 brightness)
    shimmer_scale: float = 0.15

    # (cumulative probability, density, line count)
    density_table: tuple[tuple[float, int, int], ...] = (
        (0.7, 10, 25),
        (0.9, 6, 9),
        (1.0, 20, 40),
    )
    # (cumulative probability, focus kind)
    focus_table: tuple[tuple[float, str], ...] = (
        (0.75, "None"),
        (0.95, "Eight"),
        (1.0, "Sixteen"),
    )
