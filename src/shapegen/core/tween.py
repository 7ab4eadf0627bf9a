# どこで: `src/shapegen/core/tween.py`。
# 何を: 同じ型のパラメータ 2 つを進捗 t で線形補間し、その値で Path を再生成する。
# なぜ: アニメーション中の状態を生成関数に持たせず、呼び出し側が t を進めるだけで済むようにするため。

from __future__ import annotations

import dataclasses
import math
from typing import Any, TypeVar

from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import generate, shape_registry

_P = TypeVar("_P")


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _field_kind(params_type: type, name: str, value: Any) -> str:
    """フィールドの補間種別（"float"/"int"/"bool"）を決める。

    登録済み形状なら ParamMeta.kind を、未登録なら値の型を使う。
    """
    try:
        meta = shape_registry.get_meta(shape_registry.name_for_type(params_type))
    except KeyError:
        meta = {}
    if name in meta:
        return meta[name].kind
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    return "float"


def tween(a: _P, b: _P, t: float) -> _P:
    """a から b への進捗 t の中間パラメータを返す。

    Parameters
    ----------
    a, b : dataclass
        同じ型のパラメータ値。
    t : float
        進捗。0 で a、1 で b。

    Returns
    -------
    dataclass
        float フィールドは線形補間、int フィールドは線形補間後に 0 方向へ切り捨て、
        bool フィールドは t == 1 になるまで a の値を保つ。

    Raises
    ------
    TypeError
        a と b の型が異なる、または dataclass でない場合。
    ValueError
        t が [0, 1] の外、または非有限の場合。
    """
    if type(a) is not type(b):
        raise TypeError(f"tween の a/b は同じ型である必要がある: {type(a)!r} != {type(b)!r}")
    if not dataclasses.is_dataclass(a) or isinstance(a, type):
        raise TypeError(f"tween は dataclass のインスタンスのみ受け付ける: {type(a)!r}")
    t_f = float(t)
    if not math.isfinite(t_f) or t_f < 0.0 or t_f > 1.0:
        raise ValueError(f"tween の t は [0, 1] の範囲である必要がある: got={t!r}")

    params_type = type(a)
    updates: dict[str, Any] = {}
    for f in dataclasses.fields(params_type):
        va = getattr(a, f.name)
        vb = getattr(b, f.name)
        kind = _field_kind(params_type, f.name, va)
        if kind == "bool":
            updates[f.name] = vb if t_f >= 1.0 else va
        elif kind == "int":
            updates[f.name] = int(_lerp(float(va), float(vb), t_f))
        elif kind == "float":
            updates[f.name] = _lerp(float(va), float(vb), t_f)
        else:
            updates[f.name] = vb if t_f >= 1.0 else va
    return dataclasses.replace(a, **updates)


def tween_path(a: object, b: object, t: float, rect: Rect) -> Path:
    """``generate(tween(a, b, t), rect)`` のショートカット。"""
    return generate(tween(a, b, t), rect)


__all__ = ["tween", "tween_path"]
