"""Theme-aware name table and property resolution."""

from __future__ import annotations

import pytest

from relico.lib.color.convert import Rgb
from relico.lib.palette import Palette, camel_case
from relico.lib.sgr.ops import StyleOp, TrueColorOp
from relico.lib.types import Layer, Theme


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("red", "red"),
        ("bg_red", "bgRed"),
        ("red_bright", "redBright"),
        ("bg_red_bright", "bgRedBright"),
        ("gray_50", "gray50"),
        ("bgRed", "bgRed"),
    ],
)
def test_camel_case(name: str, expected: str) -> None:
    assert camel_case(name) == expected


def test_lookup_is_case_insensitive_and_theme_aware() -> None:
    assert Palette().lookup("RED") == Rgb(255, 0, 0)
    assert Palette(Theme.SECONDARY).lookup("red") == Rgb(255, 85, 85)
    assert Palette().lookup("aliceblue") == Rgb(240, 248, 255)
    assert Palette().lookup("nope") is None


def test_resolve_styles_backgrounds_and_colors() -> None:
    palette = Palette()

    assert palette.resolve("bold") == (StyleOp((1,)),)
    assert palette.resolve("bgBlue") == (TrueColorOp(Layer.BG, Rgb(0, 0, 255)),)
    assert palette.resolve("blue") == (TrueColorOp(Layer.FG, Rgb(0, 0, 255)),)
    assert palette.resolve("gray10") == (TrueColorOp(Layer.FG, Rgb(26, 26, 26)),)
    assert palette.resolve("nope") is None
    assert palette.resolve("bgNope") is None
    assert palette.resolve("bg") is None


def test_bright_variants_request_bright_range() -> None:
    (op,) = Palette().resolve("blueBright") or ()
    assert isinstance(op, TrueColorOp)
    assert op.bright
    assert op.rgb == Rgb(64, 64, 255)


def test_custom_colors_extend_the_base_palette() -> None:
    palette = Palette(Theme.SECONDARY, {"brand": ("#111111", "#222222")})

    assert palette.lookup("brand") == Rgb(0x22, 0x22, 0x22)
    assert list(palette.base_colors())[:2] == ["black", "red"]
    assert "brand" in palette.base_colors()
