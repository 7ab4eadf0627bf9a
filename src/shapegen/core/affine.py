"""2 次元アフィン変換（回転・平行移動・スケールと合成）。"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from shapegen.core.path import Point

_SIMILARITY_ATOL = 1e-9


@dataclass(frozen=True, slots=True)
class Affine2D:
    """row-vector 規約の 2D アフィン変換。

    ``x' = a*x + c*y + tx``, ``y' = b*x + d*y + ty``。
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "Affine2D":
        return cls()

    @classmethod
    def rotation(cls, angle: float) -> "Affine2D":
        """原点周りの回転 [deg]。y 下向き座標では正の角度が時計回りに見える。"""
        rad = math.radians(float(angle))
        cos_t = math.cos(rad)
        sin_t = math.sin(rad)
        return cls(a=cos_t, b=sin_t, c=-sin_t, d=cos_t)

    @classmethod
    def translation(cls, tx: float, ty: float) -> "Affine2D":
        return cls(tx=float(tx), ty=float(ty))

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "Affine2D":
        sx_f = float(sx)
        sy_f = sx_f if sy is None else float(sy)
        return cls(a=sx_f, d=sy_f)

    @property
    def matrix(self) -> np.ndarray:
        """shape (3, 3) の row-vector 行列を返す。"""
        return np.array(
            [
                [self.a, self.b, 0.0],
                [self.c, self.d, 0.0],
                [self.tx, self.ty, 1.0],
            ],
            dtype=np.float64,
        )

    @classmethod
    def from_matrix(cls, mat: np.ndarray) -> "Affine2D":
        m = np.asarray(mat, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError("Affine2D の行列は shape (3,3) である必要がある")
        return cls(
            a=float(m[0, 0]),
            b=float(m[0, 1]),
            c=float(m[1, 0]),
            d=float(m[1, 1]),
            tx=float(m[2, 0]),
            ty=float(m[2, 1]),
        )

    def concatenating(self, other: "Affine2D") -> "Affine2D":
        """self を適用した後に other を適用する変換を返す。"""
        return Affine2D.from_matrix(self.matrix @ other.matrix)

    def apply_points(self, points: np.ndarray) -> np.ndarray:
        """shape (N, 2) の点列に変換を適用して返す。"""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError("points は shape (N,2) の配列である必要がある")
        mat = self.matrix
        return pts @ mat[:2, :2] + mat[2, :2]

    def apply(self, point: Point) -> Point:
        x = float(point.x)
        y = float(point.y)
        return Point(
            self.a * x + self.c * y + self.tx,
            self.b * x + self.d * y + self.ty,
        )

    def similarity(self) -> tuple[float, float] | None:
        """相似変換なら (scale, rotation[deg]) を、そうでなければ None を返す。

        鏡映（行列式が負）は円弧の向きが反転するため None とする。
        """
        if not math.isclose(self.a, self.d, rel_tol=0.0, abs_tol=_SIMILARITY_ATOL):
            return None
        if not math.isclose(self.b, -self.c, rel_tol=0.0, abs_tol=_SIMILARITY_ATOL):
            return None
        scale = math.hypot(self.a, self.b)
        if scale == 0.0:
            return None
        return scale, math.degrees(math.atan2(self.b, self.a))


__all__ = ["Affine2D"]
