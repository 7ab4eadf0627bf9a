# src/shapegen/core/polyline.py
# Path を平坦化した Polylines 配列のモデルと検証ロジック。

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from shapegen.core.path import ArcTo, ClosePath, LineTo, MoveTo, Path, Point

_SAME_POINT_ATOL = 1e-9


@dataclass(frozen=True, slots=True)
class Polylines:
    """Path を平坦化した結果のポリライン列。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で返す。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.asarray(self.coords)
        offsets = np.asarray(self.offsets)

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")
        if coords.dtype != np.float64:
            coords = coords.astype(np.float64, copy=False)

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")
        if offsets.dtype != np.int32:
            offsets = offsets.astype(np.int32, copy=False)
        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")
        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")
        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    def __len__(self) -> int:
        return int(self.offsets.shape[0]) - 1

    def __iter__(self) -> Iterator[np.ndarray]:
        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[int(start) : int(end)]


def _same(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return abs(a[0] - b[0]) <= _SAME_POINT_ATOL and abs(a[1] - b[1]) <= _SAME_POINT_ATOL


def _arc_samples(arc: ArcTo, arc_segments: int) -> np.ndarray:
    """円弧を開始点込みで標本化した shape (K, 2) の配列を返す。"""
    sweep = arc.sweep
    n = max(1, int(math.ceil(arc_segments * abs(sweep) / 360.0)))
    angles = np.radians(float(arc.start_angle) + sweep * np.arange(n + 1) / n)
    r = float(arc.radius)
    x = float(arc.center.x) + r * np.cos(angles)
    y = float(arc.center.y) + r * np.sin(angles)
    return np.stack([x, y], axis=1)


def flatten_path(path: Path, *, arc_segments: int | None = None) -> Polylines:
    """Path を直線近似したポリライン列に変換する。

    Parameters
    ----------
    path : Path
        対象の Path。
    arc_segments : int or None, optional
        全周あたりの円弧分割数。None なら実行時設定 `flatten.arc_segments` を使う。

    Returns
    -------
    Polylines
        サブパスごとのポリライン列。ClosePath は始点の複製で閉じる。
    """
    if arc_segments is None:
        from shapegen.core.runtime_config import runtime_config

        arc_segments = runtime_config().arc_segments
    segments = int(arc_segments)
    if segments < 1:
        raise ValueError("arc_segments は 1 以上である必要がある")

    polylines: list[np.ndarray] = []
    current: list[tuple[float, float]] = []
    cursor: Point | None = None
    subpath_start: Point | None = None

    def flush() -> None:
        if current:
            polylines.append(np.asarray(current, dtype=np.float64))
        current.clear()

    for cmd in path:
        if isinstance(cmd, MoveTo):
            flush()
            current.append((cmd.point.x, cmd.point.y))
            cursor = subpath_start = cmd.point
        elif isinstance(cmd, LineTo):
            if not current:
                if cursor is not None:
                    current.append((cursor.x, cursor.y))
                subpath_start = cursor or cmd.point
            current.append((cmd.point.x, cmd.point.y))
            cursor = cmd.point
        elif isinstance(cmd, ArcTo):
            samples = _arc_samples(cmd, segments)
            if not current and cursor is not None:
                current.append((cursor.x, cursor.y))
            if not current:
                subpath_start = cmd.start_point
            arc_points = [(float(x), float(y)) for x, y in samples]
            if current and _same(current[-1], arc_points[0]):
                arc_points = arc_points[1:]
            current.extend(arc_points)
            cursor = cmd.end_point
        elif isinstance(cmd, ClosePath):
            if current and subpath_start is not None:
                if not _same(current[-1], (subpath_start.x, subpath_start.y)):
                    current.append((subpath_start.x, subpath_start.y))
            flush()
            cursor = subpath_start

    flush()

    if not polylines:
        return Polylines(
            coords=np.zeros((0, 2), dtype=np.float64),
            offsets=np.zeros((1,), dtype=np.int32),
        )

    coords = np.concatenate(polylines, axis=0)
    offsets = np.zeros(len(polylines) + 1, dtype=np.int32)
    offsets[1:] = np.cumsum([p.shape[0] for p in polylines], dtype=np.int32)
    return Polylines(coords=coords, offsets=offsets)


__all__ = ["Polylines", "flatten_path"]
