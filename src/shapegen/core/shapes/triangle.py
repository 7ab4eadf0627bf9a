"""
どこで: `src/shapegen/core/shapes/triangle.py`。三角形の実体生成。
何を: 上辺中央を頂点、下辺両端を底角とする三角形を構築する。
"""

from __future__ import annotations

from dataclasses import dataclass

from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape


@dataclass(frozen=True, slots=True)
class TriangleParams:
    """三角形はパラメータを持たない。"""


@shape(params=TriangleParams, meta={})
def triangle(params: TriangleParams, rect: Rect) -> Path:
    """MoveTo + LineTo x3（最後は頂点へ戻る）+ ClosePath の三角形を返す。"""
    apex = (rect.mid_x, rect.min_y)
    return Path.polyline(
        [apex, (rect.min_x, rect.max_y), (rect.max_x, rect.max_y), apex],
        closed=True,
    )
