"""
どこで: `src/shapegen/core/shapes/flower.py`。花形の実体生成。
何を: 楕円の花びらを π/8 刻みで 16 回回転させ、rect 中心へ平行移動して重ねる。
なぜ: アフィン変換の合成（回転→平行移動）をそのまま形にした例として使うため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from shapegen.core.affine import Affine2D
from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape

PETAL_COUNT = 16
_PETAL_STEP_DEG = 360.0 / PETAL_COUNT
_ELLIPSE_SAMPLES = 64


@dataclass(frozen=True, slots=True)
class FlowerParams:
    petal_offset: float = -20.0
    petal_width: float = 100.0


flower_meta = {
    "petal_offset": ParamMeta(kind="float", ui_min=-40.0, ui_max=40.0),
    "petal_width": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


def _ellipse_points(x: float, y: float, width: float, height: float) -> np.ndarray:
    """矩形 (x, y, width, height) に内接する楕円を標本化した shape (N, 2) を返す。

    開始点は右端 (max_x, mid_y)。終端は複製しない。
    """
    angles = np.arange(_ELLIPSE_SAMPLES, dtype=np.float64) * (2.0 * math.pi / _ELLIPSE_SAMPLES)
    cx = x + width / 2.0
    cy = y + height / 2.0
    px = cx + (width / 2.0) * np.cos(angles)
    py = cy + (height / 2.0) * np.sin(angles)
    return np.stack([px, py], axis=1)


@shape(params=FlowerParams, meta=flower_meta)
def flower(params: FlowerParams, rect: Rect) -> Path:
    """16 枚の花びらからなる Path を生成する。

    Parameters
    ----------
    params : FlowerParams
        petal_offset は花びら楕円の x 位置、petal_width はその幅。
    rect : Rect
        花びらの長さは ``rect.width / 2``。回転中心は rect 中心。

    Returns
    -------
    Path
        花びら 1 枚ごとに MoveTo で始まり ClosePath で終わる 16 サブパス。
    """
    petal = _ellipse_points(
        float(params.petal_offset),
        0.0,
        float(params.petal_width),
        float(rect.width) / 2.0,
    )
    to_center = Affine2D.translation(rect.mid_x, rect.mid_y)

    result = Path()
    # 浮動小数の刻みを累積させず、整数カウンタから角度を決める。
    for k in range(PETAL_COUNT):
        position = Affine2D.rotation(k * _PETAL_STEP_DEG).concatenating(to_center)
        result = result + Path.polyline(position.apply_points(petal), closed=True)
    return result
