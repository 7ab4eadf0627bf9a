"""
どこで: `src/shapegen/export/svg.py`。
何を: Path を SVG の path データへ変換し、レイヤ列を SVG ファイルとして保存する関数を提供する。
なぜ: 生成したコマンド列をブラウザ等でそのまま確認できる最小のレンダリング経路を用意するため。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path as FsPath

from shapegen.core.path import ArcTo, ClosePath, LineTo, MoveTo, Path, Point
from shapegen.core.runtime_config import output_root_dir, runtime_config

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"

Color = str | tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class SvgLayer:
    """SVG に書き出す 1 レイヤ（1 つの path 要素）。

    stroke/fill は "#RRGGBB" 等の文字列か 0..1 float RGB。
    stroke_width が None なら設定 `export.svg.stroke_width` を使う。
    """

    path: Path
    stroke: Color = "#000000"
    fill: Color = "none"
    stroke_width: float | None = None


def _fmt(value: float, *, decimals: int) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _rgb01_to_hex(rgb01: tuple[float, float, float]) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""

    def _to255(v: float) -> int:
        iv = int(round(float(v) * 255.0))
        return 0 if iv < 0 else 255 if iv > 255 else iv

    r, g, b = rgb01
    return f"#{_to255(r):02X}{_to255(g):02X}{_to255(b):02X}"


def _color(value: Color) -> str:
    if isinstance(value, str):
        return value
    return _rgb01_to_hex(value)


def _pt(p: Point, decimals: int) -> str:
    return f"{_fmt(p.x, decimals=decimals)} {_fmt(p.y, decimals=decimals)}"


def _arc_parts(arc: ArcTo, decimals: int) -> list[str]:
    sweep = arc.sweep
    r = _fmt(arc.radius, decimals=decimals)
    sweep_flag = 1 if sweep > 0 else 0
    if abs(sweep) >= 360.0:
        # SVG の A は始点と終点が一致すると描かれないため、半周ずつに分ける。
        mid = arc.point_at(float(arc.start_angle) + sweep / 2.0)
        return [
            f"A {r} {r} 0 0 {sweep_flag} {_pt(mid, decimals)}",
            f"A {r} {r} 0 0 {sweep_flag} {_pt(arc.end_point, decimals)}",
        ]
    large = 1 if abs(sweep) > 180.0 else 0
    return [f"A {r} {r} 0 {large} {sweep_flag} {_pt(arc.end_point, decimals)}"]


def path_to_d(path: Path, *, decimals: int | None = None) -> str:
    """Path を SVG path の d 属性文字列へ変換して返す。

    Parameters
    ----------
    path : Path
        変換対象。
    decimals : int or None, optional
        小数桁数。None なら設定 `export.svg.decimals` を使う。

    Returns
    -------
    str
        "M"/"L"/"A"/"Z" をスペース区切りで並べた文字列。
        ArcTo は現在点があれば開始点への "L"、なければ "M" を前置する。
        半径が 0 以下の ArcTo は円弧部分を出力しない。
    """
    digits = runtime_config().svg_decimals if decimals is None else int(decimals)

    parts: list[str] = []
    current: Point | None = None
    subpath_start: Point | None = None
    for cmd in path:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {_pt(cmd.point, digits)}")
            current = subpath_start = cmd.point
        elif isinstance(cmd, LineTo):
            parts.append(f"{'L' if current is not None else 'M'} {_pt(cmd.point, digits)}")
            if current is None:
                subpath_start = cmd.point
            current = cmd.point
        elif isinstance(cmd, ArcTo):
            start = cmd.start_point
            if current is None:
                parts.append(f"M {_pt(start, digits)}")
                subpath_start = start
            elif _pt(current, digits) != _pt(start, digits):
                parts.append(f"L {_pt(start, digits)}")
            if float(cmd.radius) <= 0.0:
                _logger.warning("半径 %r の ArcTo は SVG に出力しません", cmd.radius)
                current = start
                continue
            if cmd.sweep != 0.0:
                parts.extend(_arc_parts(cmd, digits))
            current = cmd.end_point
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
            current = subpath_start
    return " ".join(parts)


def default_output_path(name: str) -> FsPath:
    """設定 `paths.output_dir` 配下の既定 SVG 出力パスを返す。"""
    return output_root_dir() / "svg" / f"{name}.svg"


def export_svg(
    layers: Sequence[SvgLayer],
    path: str | FsPath,
    *,
    canvas_size: tuple[int, int] | None = None,
    decimals: int | None = None,
) -> FsPath:
    """レイヤ列を SVG として保存する。

    Parameters
    ----------
    layers : Sequence[SvgLayer]
        書き出すレイヤ列。空の Path のレイヤはスキップする。
    path : str or Path
        出力先パス。親ディレクトリは作成する。
    canvas_size : tuple[int, int] or None, optional
        キャンバス寸法（viewBox）。現在は None を許容しない。
    decimals : int or None, optional
        座標の小数桁数。None なら設定値。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が None、または正でない場合。
    """
    _path = FsPath(path)
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    cfg = runtime_config()
    digits = cfg.svg_decimals if decimals is None else int(decimals)

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )

    for layer in layers:
        if layer.path.is_empty:
            continue
        width = cfg.svg_stroke_width if layer.stroke_width is None else layer.stroke_width
        d = path_to_d(layer.path, decimals=digits)
        lines.append(
            (
                f'  <path d="{d}" fill="{_color(layer.fill)}" stroke="{_color(layer.stroke)}" '
                f'stroke-width="{_fmt(width, decimals=digits)}" stroke-linecap="round" '
                f'stroke-linejoin="round" />'
            )
        )

    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    _logger.info("SVG を保存しました: %s", _path)
    return _path


__all__ = ["SvgLayer", "default_output_path", "export_svg", "path_to_d"]
