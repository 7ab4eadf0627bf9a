# どこで: `src/shapegen/api/shapes.py`。
# 何を: 形状名から Path を生成する公開名前空間 G を提供する。
# なぜ: パラメータ型を import せずに `G.flower(rect, petal_width=80)` の形で呼べるようにするため。

from __future__ import annotations

from typing import Any, Callable

# shape 実装モジュールをインポートしてレジストリに登録させる。
import shapegen.core.shapes  # noqa: F401
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import shape_registry


class ShapeNamespace:
    """形状 Path を生成する名前空間。

    Attributes
    ----------
    <name> : Callable[..., Path]
        登録済み形状名ごとのファクトリ。
        例: G.arc(Rect(0, 0, 300, 300), end_angle=90.0) -> Path
    """

    def __getattr__(self, name: str) -> Callable[..., Path]:
        """形状名に対応する Path ファクトリを返す。

        Raises
        ------
        AttributeError
            未登録の形状名が指定された場合。
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name not in shape_registry:
            raise AttributeError(f"未登録の shape: {name!r}")

        entry = shape_registry.get(name)

        def factory(rect: Rect, **params: Any) -> Path:
            """パラメータ型を組み立てて Path を生成する。

            省略したフィールドはパラメータ型のデフォルト値になる。
            未知のキーワードは TypeError。
            """
            values = entry.params_type(**params)
            return entry.func(values, rect)

        factory.__name__ = name
        return factory

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(shape_registry.names()))


G = ShapeNamespace()
"""形状 Path を生成する公開名前空間。"""

__all__ = ["G"]
