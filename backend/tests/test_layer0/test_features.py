"""Tests for feature selection."""

import pytest

from zellij.engine.context import Features, Focus, RenderOptions, ZellijContext
from zellij.engine.filler import FillerLibrary
from zellij.engine.layer0.s0_01_feature_selection import feature_selection, select_features
from zellij.errors import ConfigurationError


@pytest.mark.parametrize(
    "draws, expected",
    [
        ([0.0, 0.0], Features(10, 25, Focus.NONE)),
        ([0.69, 0.74], Features(10, 25, Focus.NONE)),
        ([0.7, 0.75], Features(6, 9, Focus.EIGHT)),
        ([0.89, 0.94], Features(6, 9, Focus.EIGHT)),
        ([0.9, 0.95], Features(20, 40, Focus.SIXTEEN)),
        ([0.999, 0.999], Features(20, 40, Focus.SIXTEEN)),
    ],
)
def test_select_features_thresholds(scripted, draws, expected):
    assert select_features(scripted(draws)) == expected


def test_forced_features_still_consume_draws(rgb_palette):
    forced = Features(6, 12, Focus.EIGHT)
    ctx = ZellijContext(
        options=RenderOptions(seed=5, width=800, height=600, palette=rgb_palette),
        library=FillerLibrary(),
        forced_features=forced,
    )
    feature_selection(ctx)
    assert ctx.features is forced
    assert ctx.rng.draws == 2


def test_grid_side():
    assert Features(10, 25).grid_side == 21


def test_focus_accepts_its_string_form():
    assert Features(10, 25, "Sixteen").focus is Focus.SIXTEEN


@pytest.mark.parametrize(
    "density, num_lines, focus",
    [
        (0, 10, Focus.NONE),
        (5, -1, Focus.NONE),
        (4, 20, Focus.SIXTEEN),
        (1, 4, Focus.EIGHT),
    ],
)
def test_invalid_features(density, num_lines, focus):
    with pytest.raises(ConfigurationError):
        Features(density, num_lines, focus)
