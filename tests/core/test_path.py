"""Point/Rect/Path とパスコマンドに関するテスト群。"""

from __future__ import annotations

import dataclasses

import pytest

from shapegen.core.affine import Affine2D
from shapegen.core.path import ArcTo, ClosePath, LineTo, MoveTo, Path, Point, Rect


def test_rect_reference_points() -> None:
    r = Rect(10.0, 20.0, 100.0, 50.0)
    assert (r.min_x, r.mid_x, r.max_x) == (10.0, 60.0, 110.0)
    assert (r.min_y, r.mid_y, r.max_y) == (20.0, 45.0, 70.0)
    assert r.center == Point(60.0, 45.0)


def test_rect_inset_returns_new_rect_without_clamping() -> None:
    r = Rect(0.0, 0.0, 100.0, 40.0)
    assert r.inset(10.0) == Rect(10.0, 10.0, 80.0, 20.0)
    assert r.inset(30.0) == Rect(30.0, 30.0, 40.0, -20.0)
    assert r == Rect(0.0, 0.0, 100.0, 40.0)


def test_rect_is_frozen() -> None:
    r = Rect(0.0, 0.0, 1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.x = 5.0  # type: ignore[misc]


def test_polyline_builds_move_line_close() -> None:
    p = Path.polyline([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)], closed=True)
    assert p.commands == (
        MoveTo(Point(0.0, 0.0)),
        LineTo(Point(1.0, 0.0)),
        LineTo(Point(1.0, 1.0)),
        ClosePath(),
    )


def test_polyline_of_no_points_is_empty() -> None:
    assert Path.polyline([], closed=True).is_empty


def test_path_rejects_unknown_command() -> None:
    with pytest.raises(TypeError):
        Path((MoveTo(Point(0.0, 0.0)), "L 1 1"))  # type: ignore[arg-type]


def test_path_add_and_sum_concatenate_commands() -> None:
    a = Path.polyline([(0.0, 0.0), (1.0, 0.0)])
    b = Path.polyline([(5.0, 5.0), (6.0, 5.0)])
    joined = a + b
    assert len(joined) == 4
    assert joined.commands == a.commands + b.commands
    assert sum([a, b]) == joined


def test_subpaths_split_at_move_to() -> None:
    a = Path.polyline([(0.0, 0.0), (1.0, 0.0)], closed=True)
    b = Path.polyline([(5.0, 5.0), (6.0, 5.0), (6.0, 6.0)])
    subpaths = (a + b).subpaths()
    assert subpaths == (a, b)


def test_subpaths_keeps_leading_arc_as_one_subpath() -> None:
    arc = ArcTo(Point(0.0, 0.0), 1.0, 0.0, 90.0, False)
    assert Path((arc,)).subpaths() == (Path((arc,)),)


@pytest.mark.parametrize(
    ("start", "end", "clockwise", "expected"),
    [
        (0.0, 90.0, False, 90.0),
        (0.0, 90.0, True, -270.0),
        (90.0, 0.0, False, 270.0),
        (-90.0, 90.0, True, -180.0),
        (0.0, 360.0, False, 360.0),
        (0.0, 720.0, False, 360.0),
        (0.0, -360.0, True, -360.0),
    ],
)
def test_arc_sweep_follows_core_graphics_convention(
    start: float, end: float, clockwise: bool, expected: float
) -> None:
    arc = ArcTo(Point(0.0, 0.0), 1.0, start, end, clockwise)
    assert arc.sweep == pytest.approx(expected)


def test_arc_start_and_end_points() -> None:
    arc = ArcTo(Point(150.0, 150.0), 150.0, -90.0, 90.0, False)
    assert arc.start_point.x == pytest.approx(150.0)
    assert arc.start_point.y == pytest.approx(0.0)
    assert arc.end_point.x == pytest.approx(150.0)
    assert arc.end_point.y == pytest.approx(300.0)


def test_applying_translation_moves_points() -> None:
    p = Path.polyline([(0.0, 0.0), (1.0, 2.0)], closed=True)
    moved = p.applying(Affine2D.translation(10.0, -1.0))
    assert moved.commands == (
        MoveTo(Point(10.0, -1.0)),
        LineTo(Point(11.0, 1.0)),
        ClosePath(),
    )


def test_applying_rotation_rotates_arc_angles() -> None:
    arc = ArcTo(Point(1.0, 0.0), 2.0, 0.0, 45.0, True)
    rotated = Path((arc,)).applying(Affine2D.rotation(90.0))
    out = rotated[0]
    assert isinstance(out, ArcTo)
    assert out.center.x == pytest.approx(0.0, abs=1e-12)
    assert out.center.y == pytest.approx(1.0)
    assert out.radius == pytest.approx(2.0)
    assert out.start_angle == pytest.approx(90.0)
    assert out.end_angle == pytest.approx(135.0)
    assert out.clockwise is True


def test_applying_non_uniform_scale_to_arc_raises() -> None:
    arc = ArcTo(Point(0.0, 0.0), 1.0, 0.0, 90.0, False)
    with pytest.raises(ValueError):
        Path((arc,)).applying(Affine2D.scaling(2.0, 1.0))


def test_bounds_of_polygon() -> None:
    p = Path.polyline([(10.0, 20.0), (110.0, 20.0), (60.0, 70.0)], closed=True)
    assert p.bounds(arc_segments=8) == Rect(10.0, 20.0, 100.0, 50.0)


def test_bounds_of_empty_path_is_none() -> None:
    assert Path().bounds(arc_segments=8) is None
