"""
どこで: `src/shapegen/core/shapes/rectangle.py`。矩形の実体生成。
何を: rect を inset_amount だけ縮めた閉矩形を構築する。
なぜ: color_cycling の入れ子矩形を inset の繰り返しで組み立てるため。
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape


@dataclass(frozen=True, slots=True)
class RectangleParams:
    inset_amount: float = 0.0

    def inset(self, amount: float) -> "RectangleParams":
        return dataclasses.replace(self, inset_amount=self.inset_amount + float(amount))


rectangle_meta = {
    "inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


@shape(params=RectangleParams, meta=rectangle_meta)
def rectangle(params: RectangleParams, rect: Rect) -> Path:
    """縮めた矩形の閉ポリラインを返す。幅か高さが 0 以下なら空。"""
    r = rect.inset(params.inset_amount)
    if r.width <= 0.0 or r.height <= 0.0:
        return Path()
    return Path.polyline(
        [
            (r.min_x, r.min_y),
            (r.max_x, r.min_y),
            (r.max_x, r.max_y),
            (r.min_x, r.max_y),
        ],
        closed=True,
    )
