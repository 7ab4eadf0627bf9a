"""
どこで: `src/shapegen/core/shapes/checker_board.py`。市松模様の実体生成。
何を: rect を rows x columns のセルに等分し、(row + col) が偶数のセルを閉じた矩形として並べる。
なぜ: 塗りつぶし用の基本パターンとして、行列数だけで決まる形状を提供するため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shapegen.core.errors import InvalidParameterError
from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, PathCommand, Rect
from shapegen.core.shape_registry import shape

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckerBoardParams:
    rows: int = 4
    columns: int = 4


checker_board_meta = {
    "rows": ParamMeta(kind="int", ui_min=1, ui_max=32),
    "columns": ParamMeta(kind="int", ui_min=1, ui_max=32),
}


@shape(params=CheckerBoardParams, meta=checker_board_meta)
def checker_board(params: CheckerBoardParams, rect: Rect) -> Path:
    """市松模様の矩形列を生成する。

    Parameters
    ----------
    params : CheckerBoardParams
        行数と列数。0 を含む場合は空の Path を返す。
    rect : Rect
        分割対象の矩形。

    Returns
    -------
    Path
        セルごとに MoveTo + LineTo x3 + ClosePath の閉矩形を行優先で並べた Path。

    Raises
    ------
    InvalidParameterError
        rows/columns が負の場合。
    """
    rows = int(params.rows)
    columns = int(params.columns)
    if rows < 0 or columns < 0:
        raise InvalidParameterError(
            f"checker_board の rows/columns は 0 以上である必要がある: rows={rows}, columns={columns}"
        )
    if rows == 0 or columns == 0:
        _logger.debug("checker_board: rows=%d columns=%d のため空を返す", rows, columns)
        return Path()

    row_size = float(rect.height) / rows
    column_size = float(rect.width) / columns

    commands: list[PathCommand] = []
    for row in range(rows):
        for col in range(columns):
            if (row + col) % 2 != 0:
                continue
            x0 = rect.min_x + column_size * col
            y0 = rect.min_y + row_size * row
            cell = Path.polyline(
                [
                    (x0, y0),
                    (x0 + column_size, y0),
                    (x0 + column_size, y0 + row_size),
                    (x0, y0 + row_size),
                ],
                closed=True,
            )
            commands.extend(cell.commands)
    return Path(tuple(commands))
