"""
どこで: `src/shapegen/core/shapes/trapezoid.py`。台形の実体生成。
何を: 上辺だけを inset_amount だけ内側へ寄せた閉多角形を構築する。
なぜ: inset_amount の補間で上辺の幅が変わる形状として使うため。
"""

from __future__ import annotations

from dataclasses import dataclass

from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape


@dataclass(frozen=True, slots=True)
class TrapezoidParams:
    inset_amount: float = 50.0


trapezoid_meta = {
    "inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


@shape(params=TrapezoidParams, meta=trapezoid_meta)
def trapezoid(params: TrapezoidParams, rect: Rect) -> Path:
    """台形の閉ポリラインを生成する。

    inset_amount の符号は問わない。負なら上辺が rect の外へはみ出す。
    """
    inset = float(params.inset_amount)
    points = [
        (rect.min_x, rect.max_y),
        (rect.min_x + inset, rect.min_y),
        (rect.max_x - inset, rect.min_y),
        (rect.max_x, rect.max_y),
        (rect.min_x, rect.max_y),
    ]
    return Path.polyline(points, closed=True)
