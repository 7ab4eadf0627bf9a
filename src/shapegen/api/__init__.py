# どこで: `src/shapegen/api/__init__.py`。
# 何を: 公開 API（G 名前空間）をまとめる。

from __future__ import annotations

from .shapes import G

__all__ = ["G"]
