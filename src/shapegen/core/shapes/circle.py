"""
どこで: `src/shapegen/core/shapes/circle.py`。円の実体生成。
何を: rect に内接する円（短辺基準）を inset_amount だけ縮めた全周 ArcTo として構築する。
なぜ: color_cycling の同心リングを inset の繰り返しで組み立てるため。
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import ArcTo, ClosePath, MoveTo, Path, Rect
from shapegen.core.shape_registry import shape


@dataclass(frozen=True, slots=True)
class CircleParams:
    inset_amount: float = 0.0

    def inset(self, amount: float) -> "CircleParams":
        return dataclasses.replace(self, inset_amount=self.inset_amount + float(amount))


circle_meta = {
    "inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


@shape(params=CircleParams, meta=circle_meta)
def circle(params: CircleParams, rect: Rect) -> Path:
    """MoveTo + 全周 ArcTo + ClosePath の円を返す。半径が 0 以下なら空。"""
    radius = min(float(rect.width), float(rect.height)) / 2.0 - float(params.inset_amount)
    if radius <= 0.0:
        return Path()
    ring = ArcTo(
        center=rect.center,
        radius=radius,
        start_angle=0.0,
        end_angle=360.0,
        clockwise=False,
    )
    return Path((MoveTo(ring.start_point), ring, ClosePath()))
