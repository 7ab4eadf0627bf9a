"""shape レジストリと公開名前空間 G のテスト。"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from shapegen.api import G
from shapegen.core.parameters.meta import ParamMeta
from shapegen.core.path import Path, Rect
from shapegen.core.shape_registry import generate, shape, shape_registry
from shapegen.core.shapes import (
    ArcParams,
    CheckerBoardParams,
    FlowerParams,
    SpirographParams,
)

RECT = Rect(0.0, 0.0, 300.0, 300.0)


@dataclass(frozen=True, slots=True)
class _SquareParams:
    size: float = 10.0


@shape(params=_SquareParams)
def registry_test_square(params: _SquareParams, rect: Rect) -> Path:
    s = float(params.size)
    return Path.polyline(
        [(rect.min_x, rect.min_y), (rect.min_x + s, rect.min_y), (rect.min_x + s, rect.min_y + s)],
        closed=True,
    )


def test_builtin_shapes_are_registered() -> None:
    expected = {
        "checker_board",
        "trapezoid",
        "flower",
        "triangle",
        "arc",
        "spirograph",
        "arrow",
        "circle",
        "rectangle",
        "color_cycling_circle",
        "color_cycling_rect",
    }
    assert expected <= set(shape_registry.names())
    for name in expected:
        assert name in shape_registry


def test_builtin_meta_covers_every_field() -> None:
    for name in ("checker_board", "arc", "spirograph", "flower"):
        assert set(shape_registry.get_meta(name)) == set(shape_registry.get_param_order(name))
    assert shape_registry.get_meta("spirograph")["inner_radius"] == ParamMeta(
        kind="int", ui_min=10, ui_max=150
    )


def test_get_param_order_follows_dataclass_fields() -> None:
    assert shape_registry.get_param_order("arc") == (
        "start_angle",
        "end_angle",
        "clockwise",
        "inset_amount",
    )
    assert shape_registry.get_param_order("triangle") == ()


def test_unknown_name_raises_key_error() -> None:
    with pytest.raises(KeyError):
        shape_registry.get("no_such_shape")


def test_generate_dispatches_on_params_type() -> None:
    assert len(generate(CheckerBoardParams(rows=2, columns=2), RECT).subpaths()) == 2
    assert generate(_SquareParams(size=5.0), RECT) == registry_test_square(_SquareParams(5.0), RECT)


def test_generate_rejects_unregistered_type() -> None:
    @dataclass(frozen=True)
    class Unregistered:
        value: int = 0

    with pytest.raises(TypeError):
        generate(Unregistered(), RECT)


def test_registered_func_checks_params_type() -> None:
    entry = shape_registry.get("arc")
    with pytest.raises(TypeError):
        entry.func(FlowerParams(), RECT)


def test_meta_for_unknown_field_is_rejected() -> None:
    @dataclass(frozen=True)
    class P:
        a: float = 0.0

    with pytest.raises(ValueError):

        @shape(params=P, meta={"b": ParamMeta(kind="float")})
        def registry_test_bad_meta(params: P, rect: Rect) -> Path:
            return Path()


def test_non_dataclass_params_is_rejected() -> None:
    with pytest.raises(TypeError):
        shape(params=int)


def test_params_type_cannot_be_shared_between_names() -> None:
    with pytest.raises(ValueError):

        @shape(params=_SquareParams)
        def registry_test_square_alias(params: _SquareParams, rect: Rect) -> Path:
            return Path()

    assert "registry_test_square_alias" not in shape_registry
    assert shape_registry.name_for(_SquareParams()) == "registry_test_square"


def test_g_factory_matches_generate() -> None:
    assert G.flower(RECT, petal_width=80.0) == generate(FlowerParams(petal_width=80.0), RECT)
    assert G.arc(RECT) == generate(ArcParams(), RECT)
    assert G.spirograph(RECT, amount=0.25) == generate(SpirographParams(amount=0.25), RECT)


def test_g_unknown_keyword_raises_type_error() -> None:
    with pytest.raises(TypeError):
        G.arc(RECT, radius=3.0)


def test_g_unknown_or_private_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError):
        G.no_such_shape
    with pytest.raises(AttributeError):
        G._private
    assert "flower" in dir(G)
