"""Tests for affine maps, boxes and seam merging."""

import numpy as np
import pytest
from shapely.geometry import Polygon

from zellij.errors import DataIntegrityError
from zellij.utils.geometry import (
    IDENTITY,
    Affine,
    Box,
    Point,
    apply_affine,
    apply_affine_path,
    bounding_box,
    compose,
    dist,
    fill_box,
    group_tiles,
    invert,
    match_seg,
    match_two_segs,
)


def _close(p: Point, q: Point, tol: float = 1e-9) -> bool:
    return abs(p.x - q.x) < tol and abs(p.y - q.y) < tol


def test_match_seg_maps_unit_segment():
    m = match_seg(Point(3, 4), Point(5, 7))
    assert _close(apply_affine(m, Point(0, 0)), Point(3, 4))
    assert _close(apply_affine(m, Point(1, 0)), Point(5, 7))


def test_match_two_segs_random_segments():
    gen = np.random.default_rng(7)
    checked = 0
    while checked < 100:
        p1, q1, p2, q2 = (Point(*gen.uniform(-50, 50, 2)) for _ in range(4))
        if dist(p1, q1) < 1.0:
            continue
        m = match_two_segs(p1, q1, p2, q2)
        assert _close(apply_affine(m, p1), p2)
        assert _close(apply_affine(m, q1), q2)
        checked += 1


def test_compose_order():
    shift = Affine(1, 0, 5, 0, 1, 0)
    double = Affine(2, 0, 0, 0, 2, 0)
    # double first, then shift
    assert apply_affine(compose(shift, double), Point(1, 1)) == Point(7, 2)


def test_invert_round_trip():
    m = Affine(2.0, -1.0, 3.0, 0.5, 1.5, -2.0)
    ident = compose(m, invert(m))
    assert np.allclose(ident, IDENTITY)


def test_singular_maps():
    with pytest.raises(DataIntegrityError):
        invert(Affine(1, 2, 0, 2, 4, 0))
    with pytest.raises(DataIntegrityError):
        match_two_segs(Point(1, 1), Point(1, 1), Point(0, 0), Point(0, 1))


def test_apply_affine_path_matches_pointwise():
    m = Affine(0.0, -1.0, 2.0, 1.0, 0.0, -3.0)
    coords = np.array([[0.0, 0.0], [1.0, 2.0], [-3.5, 4.0]])
    mapped = apply_affine_path(m, coords)
    for (x, y), (mx, my) in zip(coords, mapped):
        assert _close(apply_affine(m, Point(x, y)), Point(mx, my))


def test_fill_box_keeps_aspect():
    m = fill_box(Box(0, 0, 2, 1), Box(60, 60, 680, 480))
    assert _close(apply_affine(m, Point(0, 0)), Point(60, 130))
    assert _close(apply_affine(m, Point(2, 1)), Point(740, 470))


def test_fill_box_rotation():
    m = fill_box(Box(0, 0, 1, 2), Box(0, 0, 4, 2), rotate=True)
    corners = [apply_affine(m, Point(x, y)) for x in (0, 1) for y in (0, 2)]
    assert np.allclose(bounding_box(corners), Box(0, 0, 4, 2))


def test_fill_box_degenerate():
    with pytest.raises(DataIntegrityError):
        fill_box(Box(0, 0, 0, 1), Box(0, 0, 10, 10))


def test_bounding_box():
    assert bounding_box([Point(1, 5), Point(-2, 3), Point(4, 4)]) == Box(-2, 3, 6, 2)
    assert bounding_box([]) == Box(0, 0, 0, 0)


def test_group_tiles_cancels_shared_edge():
    a = [Point(0, 0), Point(1, 0), Point(1, 1)]
    b = [Point(0, 0), Point(1, 1), Point(0, 1)]
    outline = group_tiles([a, b])
    assert len(outline) == 4
    assert set(outline) == {Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)}
    assert abs(Polygon(outline).area - 1.0) < 1e-12


def test_group_tiles_tolerates_float_noise():
    a = [Point(0, 0), Point(1, 0), Point(1, 1)]
    b = [Point(1e-6, 1e-6), Point(1, 1 + 1e-6), Point(0, 1)]
    assert len(group_tiles([a, b])) == 4
