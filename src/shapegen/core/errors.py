# どこで: `src/shapegen/core/errors.py`。
# 何を: 生成関数の境界で送出するドメイン例外を定義する。
# なぜ: ゼロ除算などの内部例外ではなく、呼び出し側が捕捉できる入力エラーとして通知するため。

from __future__ import annotations


class InvalidParameterError(ValueError):
    """生成関数に不正なパラメータが渡されたことを表すエラー。

    ValueError のサブクラスなので、既存の ``except ValueError`` でも捕捉できる。
    """


__all__ = ["InvalidParameterError"]
