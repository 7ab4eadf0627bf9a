"""
どこで: `src/shapegen/core/shapes/arc.py`。円弧の実体生成。
何を: rect 中心の単一 ArcTo を構築する。角度 0° が上を向くよう -90° 補正し、掃引方向を反転する。
なぜ: 「上から時計回り」の直感的な角度指定と、inset による内側への縮小を両立させるため。
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import ArcTo, Path, Rect
from shapegen.core.shape_registry import shape

_ROTATION_ADJUSTMENT = 90.0


@dataclass(frozen=True, slots=True)
class ArcParams:
    start_angle: float = 0.0
    end_angle: float = 180.0
    clockwise: bool = True
    inset_amount: float = 0.0

    def inset(self, amount: float) -> "ArcParams":
        """inset_amount を amount だけ増やした新しい値を返す（self は変更しない）。"""
        return dataclasses.replace(self, inset_amount=self.inset_amount + float(amount))


arc_meta = {
    "start_angle": ParamMeta(kind="float", ui_min=0.0, ui_max=360.0),
    "end_angle": ParamMeta(kind="float", ui_min=0.0, ui_max=360.0),
    "clockwise": ParamMeta(kind="bool"),
    "inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


@shape(params=ArcParams, meta=arc_meta)
def arc(params: ArcParams, rect: Rect) -> Path:
    """円弧を生成する。

    Parameters
    ----------
    params : ArcParams
        start_angle/end_angle [deg] は 0° を上向きとした角度。
        clockwise=True で画面上の時計回りに描く。
    rect : Rect
        半径は ``rect.width / 2 - inset_amount``。

    Returns
    -------
    Path
        ArcTo 1 コマンドだけの Path。
    """
    return Path(
        (
            ArcTo(
                center=rect.center,
                radius=float(rect.width) / 2.0 - float(params.inset_amount),
                start_angle=float(params.start_angle) - _ROTATION_ADJUSTMENT,
                end_angle=float(params.end_angle) - _ROTATION_ADJUSTMENT,
                clockwise=not params.clockwise,
            ),
        )
    )
