"""flower の花びら配置に関するテスト群。"""

from __future__ import annotations

import pytest

from shapegen.core.path import ClosePath, MoveTo, Rect
from shapegen.core.shapes.flower import PETAL_COUNT, FlowerParams, flower

RECT = Rect(0.0, 0.0, 300.0, 300.0)


@pytest.mark.parametrize(
    "params",
    [FlowerParams(), FlowerParams(petal_offset=40.0, petal_width=0.0), FlowerParams(-40.0, 100.0)],
)
def test_always_sixteen_closed_petals(params: FlowerParams) -> None:
    petals = flower(params, RECT).subpaths()
    assert PETAL_COUNT == 16
    assert len(petals) == 16
    for petal in petals:
        assert isinstance(petal[0], MoveTo)
        assert isinstance(petal[-1], ClosePath)
        assert len(petal) == 65


def test_first_petal_is_unrotated_ellipse_moved_to_center() -> None:
    petals = flower(FlowerParams(petal_offset=-20.0, petal_width=100.0), RECT).subpaths()
    start = petals[0][0].point
    # 楕円 (x=-20, y=0, w=100, h=150) の右端 (80, 75) を中心 (150, 150) へ。
    assert start.x == pytest.approx(230.0)
    assert start.y == pytest.approx(225.0)


def test_fifth_petal_is_rotated_by_ninety_degrees() -> None:
    petals = flower(FlowerParams(petal_offset=-20.0, petal_width=100.0), RECT).subpaths()
    start = petals[4][0].point
    # (80, 75) を 90° 回転すると (-75, 80)。
    assert start.x == pytest.approx(75.0)
    assert start.y == pytest.approx(230.0)


def test_is_deterministic() -> None:
    assert flower(FlowerParams(), RECT) == flower(FlowerParams(), RECT)
