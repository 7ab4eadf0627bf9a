# どこで: `src/shapegen/core/path.py`。
# 何を: 生成関数の入出力である Point/Rect と、パスコマンド列 Path を定義する。
# なぜ: 描画系に依存しない不変な値として、任意のレンダラへ渡せる形にするため。

from __future__ import annotations

import math
from dataclasses import dataclass
from types import NotImplementedType
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    from shapegen.core.affine import Affine2D


@dataclass(frozen=True, slots=True)
class Point:
    """2 次元座標。"""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """生成関数に渡すバウンディング矩形。

    座標系は y 下向き（画面座標）とする。width/height は負でも受け付け、
    クランプは行わない。
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return float(self.x)

    @property
    def mid_x(self) -> float:
        return float(self.x) + float(self.width) / 2.0

    @property
    def max_x(self) -> float:
        return float(self.x) + float(self.width)

    @property
    def min_y(self) -> float:
        return float(self.y)

    @property
    def mid_y(self) -> float:
        return float(self.y) + float(self.height) / 2.0

    @property
    def max_y(self) -> float:
        return float(self.y) + float(self.height)

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    def inset(self, amount: float) -> "Rect":
        """各辺を amount だけ内側へ寄せた新しい Rect を返す。"""
        a = float(amount)
        return Rect(
            x=float(self.x) + a,
            y=float(self.y) + a,
            width=float(self.width) - 2.0 * a,
            height=float(self.height) - 2.0 * a,
        )


@dataclass(frozen=True, slots=True)
class MoveTo:
    """新しいサブパスを point から開始する。"""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """現在点から point まで直線を引く。"""

    point: Point


@dataclass(frozen=True, slots=True)
class ArcTo:
    """center 周りの円弧。

    Parameters
    ----------
    center : Point
        円弧の中心。
    radius : float
        半径。
    start_angle : float
        開始角 [deg]。角度 a の点は ``center + radius * (cos a, sin a)``。
    end_angle : float
        終了角 [deg]。
    clockwise : bool
        CoreGraphics と同じ規約。False で角度増加方向、True で角度減少方向に掃引する。

    Notes
    -----
    現在点がある場合は、円弧の開始点まで暗黙の直線でつながる。
    角度差が 360° 以上なら全周とみなす。
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool

    def point_at(self, angle: float) -> Point:
        """円周上の angle [deg] の点を返す。"""
        rad = math.radians(float(angle))
        r = float(self.radius)
        return Point(
            float(self.center.x) + r * math.cos(rad),
            float(self.center.y) + r * math.sin(rad),
        )

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.start_angle + self.sweep)

    @property
    def sweep(self) -> float:
        """符号付きの掃引角 [deg] を返す（正: 角度増加方向）。"""
        span = float(self.end_angle) - float(self.start_angle)
        if not self.clockwise:
            if span >= 360.0:
                return 360.0
            return span % 360.0
        if span <= -360.0:
            return -360.0
        return -((-span) % 360.0)


@dataclass(frozen=True, slots=True)
class ClosePath:
    """現在のサブパスを開始点へ閉じる。"""


PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]

_COMMAND_TYPES = (MoveTo, LineTo, ArcTo, ClosePath)


@dataclass(frozen=True, slots=True)
class Path:
    """順序付きのパスコマンド列。

    Notes
    -----
    コマンド列は tuple として完全に実体化され、生成後は変更できない。
    """

    commands: tuple[PathCommand, ...] = ()

    def __post_init__(self) -> None:
        commands = tuple(self.commands)
        for i, cmd in enumerate(commands):
            if not isinstance(cmd, _COMMAND_TYPES):
                raise TypeError(f"Path に渡せないコマンド型: index={i}, type={type(cmd)!r}")
        object.__setattr__(self, "commands", commands)

    @classmethod
    def polyline(
        cls,
        points: Iterable[Point] | Iterable[Sequence[float]] | np.ndarray,
        *,
        closed: bool = False,
    ) -> "Path":
        """点列から MoveTo + LineTo 列（closed なら ClosePath 付き）を作る。"""
        commands: list[PathCommand] = []
        for p in points:
            pt = p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))
            commands.append(LineTo(pt) if commands else MoveTo(pt))
        if closed and commands:
            commands.append(ClosePath())
        return cls(tuple(commands))

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __getitem__(self, index: int) -> PathCommand:
        return self.commands[index]

    def __add__(self, other: object) -> "Path | NotImplementedType":
        """`p1 + p2` をコマンド列の連結として表現する。"""
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.commands + other.commands)

    def __radd__(self, other: object) -> "Path | NotImplementedType":
        """`sum([...])` のために `0 + Path` を許可する。"""
        if other == 0:
            return self
        if not isinstance(other, Path):
            return NotImplemented
        return Path(other.commands + self.commands)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def subpaths(self) -> tuple["Path", ...]:
        """MoveTo ごとに分割したサブパス列を返す。

        先頭の MoveTo より前にあるコマンドは 1 つのサブパスとして扱う。
        """
        groups: list[list[PathCommand]] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo) or not groups:
                groups.append([cmd])
            else:
                groups[-1].append(cmd)
        return tuple(Path(tuple(g)) for g in groups)

    def applying(self, transform: "Affine2D") -> "Path":
        """全コマンドにアフィン変換を適用した新しい Path を返す。

        Raises
        ------
        ValueError
            ArcTo を含み、transform が回転・平行移動・等方スケール以外を含む場合。
        """
        out: list[PathCommand] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                out.append(MoveTo(transform.apply(cmd.point)))
            elif isinstance(cmd, LineTo):
                out.append(LineTo(transform.apply(cmd.point)))
            elif isinstance(cmd, ArcTo):
                similarity = transform.similarity()
                if similarity is None:
                    raise ValueError("ArcTo は相似変換（回転+平行移動+等方スケール）のみ適用できる")
                scale, rotation_deg = similarity
                out.append(
                    ArcTo(
                        center=transform.apply(cmd.center),
                        radius=float(cmd.radius) * scale,
                        start_angle=float(cmd.start_angle) + rotation_deg,
                        end_angle=float(cmd.end_angle) + rotation_deg,
                        clockwise=cmd.clockwise,
                    )
                )
            else:
                out.append(cmd)
        return Path(tuple(out))

    def bounds(self, *, arc_segments: int | None = None) -> Rect | None:
        """平坦化した輪郭の外接矩形を返す。空なら None。"""
        from shapegen.core.polyline import flatten_path

        polylines = flatten_path(self, arc_segments=arc_segments)
        coords = polylines.coords
        if coords.shape[0] == 0:
            return None
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return Rect(
            x=float(lo[0]),
            y=float(lo[1]),
            width=float(hi[0] - lo[0]),
            height=float(hi[1] - lo[1]),
        )


__all__ = [
    "ArcTo",
    "ClosePath",
    "LineTo",
    "MoveTo",
    "Path",
    "PathCommand",
    "Point",
    "Rect",
]
