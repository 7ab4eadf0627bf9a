# どこで: `src/shapegen/core/parameters/meta.py`。
# 何を: ParamMeta（パラメータの型とスライダー想定レンジ）を提供する。
# なぜ: 補間と呼び出し側 UI が必要とする型・レンジ情報を生成関数の横に一元管理するため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParamMeta:
    """パラメータの型/レンジ用メタ情報。

    ui_min/ui_max は呼び出し側スライダーの初期レンジを示すだけで、実値をクランプしない。
    """

    kind: str  # "float" | "int" | "bool"
    ui_min: Any | None = None
    ui_max: Any | None = None
