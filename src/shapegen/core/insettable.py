"""内側へ縮めたバリエーションを作れる形状パラメータのプロトコル。"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

_T = TypeVar("_T", bound="Insettable")


@runtime_checkable
class Insettable(Protocol):
    """``inset(amount)`` で同じ型の新しい値を返すパラメータ。

    元の値は変更しない。対応するのは一部の形状（arc/circle/rectangle）だけである。
    """

    inset_amount: float

    def inset(self: _T, amount: float) -> _T: ...


def is_insettable(params: object) -> bool:
    """params が Insettable を満たすかどうかを返す。"""
    return isinstance(params, Insettable)


__all__ = ["Insettable", "is_insettable"]
