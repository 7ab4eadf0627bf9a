"""
どこで: `src/shapegen/core/shapes/spirograph.py`。スピログラフ（内トロコイド）の実体生成。
何を: 内円/外円の半径とペン距離から θ を 0.01 刻みで進め、曲線上の点列を構築する。
なぜ: 整数パラメータの組み合わせで多様な閉曲線を作れる形状として提供するため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from shapegen.core.errors import InvalidParameterError
from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape

_logger = logging.getLogger(__name__)

THETA_STEP = 0.01
# end_theta / THETA_STEP が浮動小数誤差で整数をわずかに下回っても 1 刻み欠けないための許容量。
_STEP_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class SpirographParams:
    inner_radius: int = 125
    outer_radius: int = 75
    distance: int = 25
    amount: float = 1.0


spirograph_meta = {
    "inner_radius": ParamMeta(kind="int", ui_min=10, ui_max=150),
    "outer_radius": ParamMeta(kind="int", ui_min=10, ui_max=150),
    "distance": ParamMeta(kind="int", ui_min=1, ui_max=150),
    "amount": ParamMeta(kind="float", ui_min=0.0, ui_max=1.0),
}


def gcd(a: int, b: int) -> int:
    """非負整数の最大公約数を返す（``gcd(a, 0) == a``）。

    Raises
    ------
    InvalidParameterError
        負の値が渡された場合。
    """
    a_i = int(a)
    b_i = int(b)
    if a_i < 0 or b_i < 0:
        raise InvalidParameterError(f"gcd は非負整数のみ受け付ける: a={a_i}, b={b_i}")
    while b_i != 0:
        a_i, b_i = b_i, a_i % b_i
    return a_i


def end_theta(params: SpirographParams) -> float:
    """曲線が閉じるまでの θ 終端に amount を掛けた値を返す。

    Raises
    ------
    InvalidParameterError
        outer_radius <= 0、inner_radius < 0、または amount が有限でない場合。
    """
    inner = int(params.inner_radius)
    outer = int(params.outer_radius)
    if outer <= 0:
        raise InvalidParameterError(f"spirograph の outer_radius は正である必要がある: got={outer}")
    if inner < 0:
        raise InvalidParameterError(f"spirograph の inner_radius は 0 以上である必要がある: got={inner}")
    amount = float(params.amount)
    if not math.isfinite(amount):
        raise InvalidParameterError(f"spirograph の amount は有限である必要がある: got={amount!r}")
    divisor = gcd(inner, outer)
    return math.ceil(2.0 * math.pi * outer / divisor) * amount


@shape(params=SpirographParams, meta=spirograph_meta)
def spirograph(params: SpirographParams, rect: Rect) -> Path:
    """内トロコイドの開ポリラインを生成する。

    Parameters
    ----------
    params : SpirographParams
        inner_radius/outer_radius/distance は整数、amount は描画割合。
    rect : Rect
        曲線は rect 中心へ平行移動する。

    Returns
    -------
    Path
        θ=0 の MoveTo に続き、θ_k = k * 0.01 (k=1..n) の LineTo。
        ``n = floor(end_theta / 0.01)``（誤差 1e-9 刻みまでは切り上げる）。amount が負なら空。

    Raises
    ------
    InvalidParameterError
        outer_radius <= 0、inner_radius < 0、または amount が有限でない場合。
    """
    theta_end = end_theta(params)
    if theta_end < 0.0:
        _logger.debug("spirograph: amount=%r が負のため空を返す", params.amount)
        return Path()

    # 半径と距離は end_theta と同じく整数へ切り捨てて使う。
    inner = float(int(params.inner_radius))
    outer = float(int(params.outer_radius))
    distance = float(int(params.distance))
    difference = inner - outer

    steps = math.floor(theta_end / THETA_STEP + _STEP_TOLERANCE)
    theta = np.arange(steps + 1, dtype=np.float64) * THETA_STEP
    x = difference * np.cos(theta) + distance * np.cos(difference / outer * theta)
    y = difference * np.sin(theta) + distance * np.sin(difference / outer * theta)
    points = np.stack([x + rect.mid_x, y + rect.mid_y], axis=1)
    return Path.polyline(points)
