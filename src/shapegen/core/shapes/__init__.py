# 組み込み shape 実装モジュールをインポートしてレジストリに登録させる。

from __future__ import annotations

from .arc import ArcParams
from .arrow import ArrowParams
from .checker_board import CheckerBoardParams
from .circle import CircleParams
from .color_cycling import ColorCyclingCircleParams, ColorCyclingRectParams, ring_gradient
from .flower import FlowerParams
from .rectangle import RectangleParams
from .spirograph import SpirographParams, gcd
from .trapezoid import TrapezoidParams
from .triangle import TriangleParams

__all__ = [
    "ArcParams",
    "ArrowParams",
    "CheckerBoardParams",
    "CircleParams",
    "ColorCyclingCircleParams",
    "ColorCyclingRectParams",
    "FlowerParams",
    "RectangleParams",
    "SpirographParams",
    "TrapezoidParams",
    "TriangleParams",
    "gcd",
    "ring_gradient",
]
