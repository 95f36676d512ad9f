"""End-to-end tests of the generation pipeline."""

from collections import Counter

import numpy as np
import pytest

from zellij.engine.context import Features, Focus, RenderOptions, ZellijContext
from zellij.engine.filler import Cluster, FillerLibrary, FillerShape, parse_signature
from zellij.engine.pipeline import Pipeline, build_design, generate_zellij
from zellij.engine.registry import Layer, StageRegistry, StageSpec
from zellij.errors import ConfigurationError, DataIntegrityError
from zellij.utils.geometry import Point, dist

FORCED = Features(density=10, num_lines=25, focus=Focus.NONE)


def _options(palette, seed=42, shimmer=-1, width=800, height=800) -> RenderOptions:
    return RenderOptions(seed=seed, width=width, height=height, palette=palette, shimmer=shimmer)


def test_pipeline_runs_stages_in_order(rgb_palette):
    reg = StageRegistry()
    results = []

    reg.register(StageSpec(id="S0.02", layer=Layer.CONSTRUCTION, fn=lambda ctx: results.append("b"), dependencies=["S0.01"]))
    reg.register(StageSpec(id="S0.01", layer=Layer.CONSTRUCTION, fn=lambda ctx: results.append("a")))

    ctx = Pipeline(registry=reg).run(ZellijContext(options=_options(rgb_palette), library=FillerLibrary()))
    assert results == ["a", "b"]
    assert ctx.completed_stages == {"S0.01", "S0.02"}


def test_pipeline_records_and_reraises(rgb_palette):
    reg = StageRegistry()

    def fail(ctx):
        raise DataIntegrityError("broken cluster")

    reg.register(StageSpec(id="S0.01", layer=Layer.CONSTRUCTION, fn=fail))

    ctx = ZellijContext(options=_options(rgb_palette), library=FillerLibrary())
    with pytest.raises(DataIntegrityError):
        Pipeline(registry=reg).run(ctx)
    assert "broken cluster" in ctx.errors["S0.01"]


def test_deterministic(rgb_palette, library):
    first = generate_zellij(_options(rgb_palette, seed=1234, shimmer=3), library)
    second = generate_zellij(_options(rgb_palette, seed=1234, shimmer=3), library)
    assert first == second


def test_forced_features_produce_palette_shapes(rgb_palette, library):
    shapes = generate_zellij(_options(rgb_palette), library, features=FORCED)
    assert shapes
    for shape in shapes:
        assert len(shape.path) >= 3
        assert shape.color == rgb_palette[min(shape.colour_index, 4)]


def test_shapes_stay_inside_canvas(rgb_palette, library):
    shapes = generate_zellij(_options(rgb_palette, width=1000, height=700), library, features=FORCED)
    coords = np.asarray([p for s in shapes for p in s.path])
    assert coords[:, 0].min() >= -1e-6 and coords[:, 0].max() <= 1000 + 1e-6
    assert coords[:, 1].min() >= -1e-6 and coords[:, 1].max() <= 700 + 1e-6


def test_shimmer_only_touches_fills(rgb_palette, library):
    shapes = generate_zellij(_options(rgb_palette, shimmer=4), library, features=FORCED)
    fills = [s for s in shapes if s.colour_index >= 2]
    for shape in shapes:
        if shape.colour_index < 2:
            assert shape.color == rgb_palette[shape.colour_index]
    assert fills
    assert any(s.color != rgb_palette[min(s.colour_index, 4)] for s in fills)


def test_traced_tiles_have_unit_edges(rgb_palette, library):
    ctx = build_design(_options(rgb_palette, seed=99), library, features=FORCED)
    assert ctx.tiles
    for tile in ctx.tiles:
        n = len(tile.path)
        for i in range(n):
            assert abs(dist(tile.path[i], tile.path[(i + 1) % n]) - 1.0) < 1e-6
        assert tile.polygon.is_valid


def test_boundary_is_closed(rgb_palette, library):
    ctx = build_design(_options(rgb_palette, seed=7), library, features=FORCED)
    endpoints = Counter(
        (round(pt.x, 6), round(pt.y, 6)) for edge in ctx.boundary for pt in edge
    )
    odd = [pt for pt, count in endpoints.items() if count % 2]
    assert len(odd) <= 2


@pytest.mark.parametrize("focus", [Focus.EIGHT, Focus.SIXTEEN])
def test_focus_designs_complete(rgb_palette, library, focus):
    ctx = build_design(_options(rgb_palette, seed=2024), library, features=Features(10, 25, focus))
    assert len(ctx.groups) == 1
    assert len(ctx.completed_stages) == 7
    for tile in ctx.tiles:
        if tile.group == 0:
            assert tile.polygon.area > 0


def test_empty_library_decorates_nothing(rgb_palette):
    ctx = build_design(_options(rgb_palette), FillerLibrary(), features=FORCED)
    assert ctx.shapes == []
    assert sum(ctx.unmatched.values()) == len(ctx.tiles)


def test_small_canvas_rejected(rgb_palette, library):
    with pytest.raises(ConfigurationError):
        generate_zellij(_options(rgb_palette, width=120), library)


def test_zero_length_reference_edge(rgb_palette):
    shape = FillerShape(path=np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 1.0]]), colour=2)
    broken = Cluster(fv=Point(0, 0), fw=Point(0, 0), shapes=(shape,))
    library = FillerLibrary(
        {parse_signature(key): [broken] for key in ("LLLL", "VCVC", "LCCLCC", "CCCCCCCC")}
    )
    with pytest.raises(DataIntegrityError):
        generate_zellij(_options(rgb_palette), library, features=FORCED)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"seed": -1},
        {"width": 0},
        {"height": float("nan")},
        {"palette": ("#000000", "#ffffff")},
        {"palette": ("#000000", "#ffffff", "red", "#00ff00", "#0000ff")},
        {"shimmer": -2},
    ],
)
def test_invalid_options(rgb_palette, kwargs):
    values = {"seed": 1, "width": 800, "height": 800, "palette": rgb_palette, "shimmer": -1}
    values.update(kwargs)
    with pytest.raises(ConfigurationError):
        RenderOptions(**values)
