# src/shapegen/core/shape_registry.py
# 形状名とパラメータ型から Path 生成関数を引けるレジストリ。

from __future__ import annotations

import dataclasses
from collections.abc import ItemsView
from dataclasses import dataclass
from typing import Any, Callable

from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect

ShapeFunc = Callable[[Any, Rect], Path]


@dataclass(frozen=True, slots=True)
class ShapeEntry:
    """登録済み形状 1 件分の情報。"""

    name: str
    func: ShapeFunc
    params_type: type
    meta: dict[str, ParamMeta]


class ShapeRegistry:
    """形状名・パラメータ型と生成関数を対応付けるレジストリ。

    Notes
    -----
    登録された関数のシグネチャは ``func(params, rect) -> Path`` を想定する。
    パラメータ型 1 つにつき形状は 1 つだけ登録できる。
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[str, ShapeEntry] = {}
        self._by_type: dict[type, str] = {}

    def _register(
        self,
        name: str,
        func: ShapeFunc,
        *,
        params_type: type,
        meta: dict[str, ParamMeta],
        overwrite: bool = True,
    ) -> None:
        """形状を登録する（内部用）。

        Notes
        -----
        登録は `@shape` デコレータ経由に統一する。
        """
        if not overwrite and name in self._items:
            raise ValueError(f"shape '{name}' は既に登録されている")
        owner = self._by_type.get(params_type)
        if owner is not None and owner != name:
            raise ValueError(
                f"パラメータ型 {params_type.__name__} は shape '{owner}' に登録済み"
            )
        previous = self._items.get(name)
        if previous is not None:
            self._by_type.pop(previous.params_type, None)
        self._items[name] = ShapeEntry(
            name=name,
            func=func,
            params_type=params_type,
            meta=dict(meta),
        )
        self._by_type[params_type] = name

    def get(self, name: str) -> ShapeEntry:
        """形状名に対応するエントリを取得する。

        Raises
        ------
        KeyError
            未登録の形状名が指定された場合。
        """
        return self._items[name]

    def __contains__(self, name: object) -> bool:
        """指定された名前が登録済みかどうかを返す。"""
        return name in self._items

    def __getitem__(self, name: str) -> ShapeEntry:
        """辞書風にエントリを取得するショートカット。"""
        return self.get(name)

    def items(self) -> ItemsView[str, ShapeEntry]:
        """登録済みエントリの (name, entry) ビューを返す。"""
        return self._items.items()

    def names(self) -> tuple[str, ...]:
        """登録済みの形状名を登録順に返す。"""
        return tuple(self._items)

    def get_meta(self, name: str) -> dict[str, ParamMeta]:
        """形状名に対応する ParamMeta 辞書を取得する。"""
        return dict(self._items[name].meta)

    def get_param_order(self, name: str) -> tuple[str, ...]:
        """形状名に対応するパラメータのフィールド順を返す。"""
        params_type = self._items[name].params_type
        return tuple(f.name for f in dataclasses.fields(params_type))

    def name_for_type(self, params_type: type) -> str:
        """パラメータ型から形状名を引く。未登録なら KeyError。"""
        return self._by_type[params_type]

    def name_for(self, params: object) -> str:
        """パラメータ値の型から形状名を引く。

        Raises
        ------
        TypeError
            型が未登録の場合。
        """
        try:
            return self.name_for_type(type(params))
        except KeyError:
            raise TypeError(f"未登録のパラメータ型: {type(params)!r}") from None


shape_registry = ShapeRegistry()
"""グローバルな shape レジストリインスタンス。"""


def shape(
    *,
    params: type,
    meta: dict[str, ParamMeta] | None = None,
    overwrite: bool = True,
) -> Callable[[ShapeFunc], ShapeFunc]:
    """グローバル shape レジストリ用デコレータ。

    関数名をそのまま形状名として登録する。

    Parameters
    ----------
    params : type
        生成関数が受け取る frozen dataclass のパラメータ型。
    meta : dict[str, ParamMeta] or None, optional
        フィールドごとのメタ情報。組み込み形状では全フィールド分が必須。
    overwrite : bool, optional
        既存エントリがある場合に上書きするかどうか。

    Examples
    --------
    @shape(params=TriangleParams, meta={})
    def triangle(params, rect):
        ...
    """
    if not dataclasses.is_dataclass(params) or not isinstance(params, type):
        raise TypeError("shape の params は dataclass 型である必要がある")
    field_names = [f.name for f in dataclasses.fields(params)]

    def decorator(f: ShapeFunc) -> ShapeFunc:
        param_meta = dict(meta) if meta is not None else {}
        unknown = [k for k in param_meta if k not in field_names]
        if unknown:
            raise ValueError(
                f"shape '{f.__name__}' の meta がフィールドに存在しない: {unknown!r}"
            )
        module = str(f.__module__)
        if module.startswith("shapegen.core.shapes."):
            missing = [k for k in field_names if k not in param_meta]
            if meta is None or missing:
                raise ValueError(
                    f"組み込み shape は全フィールドの meta 必須: "
                    f"{f.__module__}.{f.__name__} missing={missing!r}"
                )

        def wrapper(values: Any, rect: Rect) -> Path:
            if not isinstance(values, params):
                raise TypeError(
                    f"shape '{f.__name__}' は {params.__name__} を受け取る: got={type(values)!r}"
                )
            return f(values, rect)

        shape_registry._register(
            f.__name__,
            wrapper,
            params_type=params,
            meta=param_meta,
            overwrite=overwrite,
        )
        return f

    return decorator


def generate(params: object, rect: Rect) -> Path:
    """パラメータ型に対応する生成関数で Path を生成する。

    Parameters
    ----------
    params : object
        登録済み形状のパラメータ値。
    rect : Rect
        バウンディング矩形。

    Returns
    -------
    Path
        生成されたコマンド列。

    Raises
    ------
    TypeError
        パラメータ型が未登録の場合。
    """
    name = shape_registry.name_for(params)
    return shape_registry.get(name).func(params, rect)


__all__ = ["ShapeEntry", "ShapeRegistry", "generate", "shape", "shape_registry"]
