"""color_cycling のリング生成と色相計算に関するテスト群。"""

from __future__ import annotations

import pytest

from shapegen.core.errors import InvalidParameterError
from shapegen.core.path import ArcTo, Rect
from shapegen.core.shapes.color_cycling import (
    ColorCyclingCircleParams,
    ColorCyclingRectParams,
    color_cycling_circle,
    color_cycling_rect,
    ring_gradient,
    ring_hue,
)

RECT = Rect(0.0, 0.0, 300.0, 300.0)


def test_circle_rings_are_inset_by_value() -> None:
    path = color_cycling_circle(ColorCyclingCircleParams(amount=0.0, steps=100), RECT)
    rings = path.subpaths()
    assert len(rings) == 100
    radii = [r[1].radius for r in rings if isinstance(r[1], ArcTo)]
    assert radii[:3] == [150.0, 149.0, 148.0]
    assert radii[-1] == 51.0


def test_degenerate_rings_are_skipped() -> None:
    circles = color_cycling_circle(ColorCyclingCircleParams(steps=200), RECT).subpaths()
    rects = color_cycling_rect(ColorCyclingRectParams(steps=200), RECT).subpaths()
    assert len(circles) == 150
    assert len(rects) == 150


def test_rect_rings_are_nested() -> None:
    rings = color_cycling_rect(ColorCyclingRectParams(steps=3), RECT).subpaths()
    assert [r[0].point.x for r in rings] == [0.0, 1.0, 2.0]


def test_steps_must_be_positive() -> None:
    with pytest.raises(InvalidParameterError):
        color_cycling_circle(ColorCyclingCircleParams(steps=0), RECT)
    with pytest.raises(InvalidParameterError):
        ring_gradient(0, steps=0, amount=0.0)


def test_ring_hue_wraps_above_one() -> None:
    assert ring_hue(50, steps=100, amount=0.0) == pytest.approx(0.5)
    assert ring_hue(50, steps=100, amount=0.75) == pytest.approx(0.25)
    assert ring_hue(0, steps=100, amount=1.0) == pytest.approx(1.0)


def test_ring_gradient_top_and_bottom_brightness() -> None:
    top, bottom = ring_gradient(0, steps=100, amount=0.0)
    assert top == pytest.approx((1.0, 0.0, 0.0))
    assert bottom == pytest.approx((0.5, 0.0, 0.0))

    top, bottom = ring_gradient(50, steps=100, amount=0.75)
    assert top == pytest.approx((0.5, 1.0, 0.0))
    assert bottom == pytest.approx((0.25, 0.5, 0.0))
