"""
どこで: `src/shapegen/core/shapes/color_cycling.py`。色相が巡回する同心リングの実体生成。
何を: circle/rectangle を 0..steps-1 だけ inset したリングを並べ、リングごとのグラデーション色を返す。
なぜ: inset の繰り返しと色相オフセット amount の補間だけで、色が流れて見える図形を作るため。
"""

from __future__ import annotations

import colorsys
import logging
from dataclasses import dataclass

from shapegen.core.errors import InvalidParameterError
from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape
from shapegen.core.shapes.circle import CircleParams, circle
from shapegen.core.shapes.rectangle import RectangleParams, rectangle

_logger = logging.getLogger(__name__)

RGB = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class ColorCyclingCircleParams:
    amount: float = 0.0
    steps: int = 100


@dataclass(frozen=True, slots=True)
class ColorCyclingRectParams:
    amount: float = 0.0
    steps: int = 100


color_cycling_meta = {
    "amount": ParamMeta(kind="float", ui_min=0.0, ui_max=1.0),
    "steps": ParamMeta(kind="int", ui_min=1, ui_max=200),
}


def _checked_steps(steps: int) -> int:
    steps_i = int(steps)
    if steps_i < 1:
        raise InvalidParameterError(f"color_cycling の steps は 1 以上である必要がある: got={steps_i}")
    return steps_i


def ring_hue(value: int, *, steps: int, amount: float) -> float:
    """リング value の色相（0..1、1 を超えたら 1 を引く）を返す。"""
    hue = int(value) / _checked_steps(steps) + float(amount)
    if hue > 1.0:
        hue -= 1.0
    return hue


def ring_gradient(value: int, *, steps: int, amount: float) -> tuple[RGB, RGB]:
    """リング value の上端/下端の RGB（0..1）を返す。

    上端は明度 1、下端は明度 0.5。彩度はどちらも 1。
    """
    hue = ring_hue(value, steps=steps, amount=amount)
    top = colorsys.hsv_to_rgb(hue, 1.0, 1.0)
    bottom = colorsys.hsv_to_rgb(hue, 1.0, 0.5)
    return top, bottom


def _rings(inset_shape, base, steps: int, rect: Rect) -> Path:
    result = Path()
    skipped = 0
    for value in range(steps):
        ring = inset_shape(base.inset(value), rect)
        if ring.is_empty:
            skipped += 1
            continue
        result = result + ring
    if skipped:
        _logger.debug("color_cycling: 退化したリング %d 本をスキップ", skipped)
    return result


@shape(params=ColorCyclingCircleParams, meta=color_cycling_meta)
def color_cycling_circle(params: ColorCyclingCircleParams, rect: Rect) -> Path:
    """value=0..steps-1 だけ inset した円を順に並べた Path を返す。

    半径が 0 以下になるリングは出力しない。色は ``ring_gradient`` で別途求める。
    """
    return _rings(circle, CircleParams(), _checked_steps(params.steps), rect)


@shape(params=ColorCyclingRectParams, meta=color_cycling_meta)
def color_cycling_rect(params: ColorCyclingRectParams, rect: Rect) -> Path:
    """value=0..steps-1 だけ inset した矩形を順に並べた Path を返す。"""
    return _rings(rectangle, RectangleParams(), _checked_steps(params.steps), rect)
