"""arc の生成と inset に関するテスト群。"""

from __future__ import annotations

import dataclasses

import pytest

from shapegen.core.insettable import is_insettable
from shapegen.core.path import ArcTo, Point, Rect
from shapegen.core.shapes.arc import ArcParams, arc
from shapegen.core.shapes.flower import FlowerParams
from shapegen.core.shapes.trapezoid import TrapezoidParams

RECT = Rect(0.0, 0.0, 300.0, 300.0)


def test_half_circle_on_300_rect() -> None:
    path = arc(ArcParams(start_angle=0.0, end_angle=180.0, clockwise=True), RECT)
    assert len(path) == 1
    cmd = path[0]
    assert isinstance(cmd, ArcTo)
    assert cmd.center == Point(150.0, 150.0)
    assert cmd.radius == 150.0
    assert cmd.start_angle == -90.0
    assert cmd.end_angle == 90.0
    assert cmd.clockwise is False


def test_clockwise_flag_is_inverted_and_starts_at_top() -> None:
    cw = arc(ArcParams(start_angle=0.0, end_angle=90.0, clockwise=True), RECT)[0]
    ccw = arc(ArcParams(start_angle=0.0, end_angle=90.0, clockwise=False), RECT)[0]
    assert cw.sweep == pytest.approx(90.0)
    assert ccw.sweep == pytest.approx(-270.0)
    assert cw.start_point.x == pytest.approx(150.0)
    assert cw.start_point.y == pytest.approx(0.0)
    assert cw.end_point.x == pytest.approx(300.0)
    assert cw.end_point.y == pytest.approx(150.0)


def test_inset_amount_shrinks_radius() -> None:
    cmd = arc(ArcParams(inset_amount=10.0), RECT)[0]
    assert cmd.radius == 140.0


def test_inset_returns_new_value() -> None:
    base = ArcParams()
    first = base.inset(10.0)
    second = first.inset(10.0)
    again = base.inset(10.0)

    assert base.inset_amount == 0.0
    assert first.inset_amount == 10.0
    assert second.inset_amount == 20.0
    assert again == first
    assert again is not first
    assert dataclasses.replace(second, inset_amount=0.0) == base


def test_params_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ArcParams().inset_amount = 5.0  # type: ignore[misc]


def test_only_some_params_are_insettable() -> None:
    assert is_insettable(ArcParams())
    assert not is_insettable(FlowerParams())
    assert not is_insettable(TrapezoidParams())
