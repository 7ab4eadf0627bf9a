"""Affine2D の合成と適用に関するテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from shapegen.core.affine import Affine2D
from shapegen.core.path import Point


def _assert_point(p: Point, x: float, y: float) -> None:
    assert p.x == pytest.approx(x, abs=1e-9)
    assert p.y == pytest.approx(y, abs=1e-9)


def test_rotation_90_maps_x_axis_to_y_axis() -> None:
    _assert_point(Affine2D.rotation(90.0).apply(Point(1.0, 0.0)), 0.0, 1.0)


def test_translation() -> None:
    _assert_point(Affine2D.translation(5.0, -2.0).apply(Point(1.0, 1.0)), 6.0, -1.0)


def test_concatenating_applies_self_first() -> None:
    rotate = Affine2D.rotation(90.0)
    shift = Affine2D.translation(10.0, 0.0)
    _assert_point(rotate.concatenating(shift).apply(Point(1.0, 0.0)), 10.0, 1.0)
    _assert_point(shift.concatenating(rotate).apply(Point(1.0, 0.0)), 0.0, 11.0)


def test_apply_points_matches_apply() -> None:
    t = Affine2D.rotation(30.0).concatenating(Affine2D.translation(3.0, 4.0))
    pts = np.array([[0.0, 0.0], [1.0, 2.0], [-3.0, 0.5]])
    out = t.apply_points(pts)
    expected = [[t.apply(Point(x, y)).x, t.apply(Point(x, y)).y] for x, y in pts]
    np.testing.assert_allclose(out, expected, rtol=0.0, atol=1e-12)


def test_apply_points_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        Affine2D.identity().apply_points(np.zeros((3, 3)))


def test_similarity_reports_scale_and_rotation() -> None:
    t = Affine2D.scaling(2.0).concatenating(Affine2D.rotation(30.0))
    similarity = t.similarity()
    assert similarity is not None
    scale, rotation = similarity
    assert scale == pytest.approx(2.0)
    assert rotation == pytest.approx(30.0)


@pytest.mark.parametrize("t", [Affine2D.scaling(2.0, 3.0), Affine2D.scaling(1.0, -1.0)])
def test_similarity_is_none_for_non_uniform_or_mirrored(t: Affine2D) -> None:
    assert t.similarity() is None
