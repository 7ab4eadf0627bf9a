"""
どこで: `src/shapegen/core/shapes/arrow.py`。矢印の実体生成。
何を: 上向きの矢じりと軸からなる 8 点の閉多角形を構築する。
なぜ: x_offset（軸の半幅）と y_offset（矢じりの高さ調整）の 2 値で形が決まる例として使うため。
"""

from __future__ import annotations

from dataclasses import dataclass

from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape


@dataclass(frozen=True, slots=True)
class ArrowParams:
    x_offset: float = 40.0
    y_offset: float = 20.0


arrow_meta = {
    "x_offset": ParamMeta(kind="float", ui_min=20.0, ui_max=80.0),
    "y_offset": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


@shape(params=ArrowParams, meta=arrow_meta)
def arrow(params: ArrowParams, rect: Rect) -> Path:
    """矢印の閉ポリラインを生成する。

    Parameters
    ----------
    params : ArrowParams
        x_offset は軸の半幅、y_offset は矢じり付け根を中央から上へずらす量。
    rect : Rect
        外接矩形。頂点は上辺中央、軸の下端は下辺に置く。

    Returns
    -------
    Path
        MoveTo + LineTo x7（最後は頂点へ戻る）+ ClosePath。
    """
    dx = float(params.x_offset)
    shoulder_y = rect.mid_y - float(params.y_offset)
    tip = (rect.mid_x, rect.min_y)
    points = [
        tip,
        (rect.min_x, shoulder_y),
        (rect.mid_x - dx, shoulder_y),
        (rect.mid_x - dx, rect.max_y),
        (rect.mid_x + dx, rect.max_y),
        (rect.mid_x + dx, shoulder_y),
        (rect.max_x, shoulder_y),
        tip,
    ]
    return Path.polyline(points, closed=True)
