# どこで: `src/shapegen/__init__.py`。
# 何を: ルート `shapegen` パッケージを定義する。
# なぜ: import 起点を `shapegen` に統一するため。

from __future__ import annotations

from shapegen.api import G
from shapegen.core.affine import Affine2D
from shapegen.core.errors import InvalidParameterError
from shapegen.core.insettable import Insettable
from shapegen.core.path import ArcTo, ClosePath, LineTo, MoveTo, Path, PathCommand, Point, Rect
from shapegen.core.shape_registry import generate, shape, shape_registry
from shapegen.core.shapes import (
    ArcParams,
    ArrowParams,
    CheckerBoardParams,
    CircleParams,
    ColorCyclingCircleParams,
    ColorCyclingRectParams,
    FlowerParams,
    RectangleParams,
    SpirographParams,
    TrapezoidParams,
    TriangleParams,
    ring_gradient,
)
from shapegen.core.tween import tween, tween_path

__all__ = [
    "Affine2D",
    "ArcParams",
    "ArcTo",
    "ArrowParams",
    "CheckerBoardParams",
    "CircleParams",
    "ClosePath",
    "ColorCyclingCircleParams",
    "ColorCyclingRectParams",
    "FlowerParams",
    "G",
    "InvalidParameterError",
    "Insettable",
    "LineTo",
    "MoveTo",
    "Path",
    "PathCommand",
    "Point",
    "Rect",
    "RectangleParams",
    "SpirographParams",
    "TrapezoidParams",
    "TriangleParams",
    "generate",
    "ring_gradient",
    "shape",
    "shape_registry",
    "tween",
    "tween_path",
]
