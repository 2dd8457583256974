"""Composite effects: gradients, highlight, links, JSON and schemes."""

from __future__ import annotations

import json

import pytest

import relico
from relico.lib.apply import strip_ansi
from relico.lib.color.convert import Rgb
from relico.lib.config import configure
from relico.lib.effects import (
    auto_contrast,
    blend,
    check_contrast,
    color_wrap,
    colorize_json,
    create_color_scheme,
    get_accessible_color,
    gradient,
    highlight,
    link,
    multi_gradient,
    rainbow,
    safe_bg,
    safe_color,
)
from relico.lib.errors import InvalidColorError
from relico.lib.formatter import Formatter, re
from relico.lib.level import set_color_level
from relico.lib.sgr.ops import TrueColorOp
from relico.lib.types import Layer


def _fg(r: int, g: int, b: int, char: str) -> str:
    return f"\x1b[38;2;{r};{g};{b}m{char}\x1b[0m"


def test_rainbow_steps_hue_across_the_text() -> None:
    assert rainbow("abc") == _fg(255, 0, 0, "a") + _fg(0, 255, 255, "b") + _fg(255, 0, 0, "c")


def test_rainbow_single_character_uses_start_hue() -> None:
    assert rainbow("a", start_hue=120) == _fg(0, 255, 0, "a")


def test_gradient_interpolates_between_endpoints() -> None:
    result = gradient("abc", "#000000", "#ffffff")

    assert result == _fg(0, 0, 0, "a") + _fg(128, 128, 128, "b") + _fg(255, 255, 255, "c")


def test_gradient_smoothing_pushes_change_toward_the_end() -> None:
    result = gradient("abc", "#000000", "#ffffff", smoothing=2)

    assert _fg(64, 64, 64, "b") in result


def test_multi_gradient_passes_through_every_stop() -> None:
    result = multi_gradient("abc", ["#ff0000", "#00ff00", "#0000ff"])

    assert result == _fg(255, 0, 0, "a") + _fg(0, 255, 0, "b") + _fg(0, 0, 255, "c")


def test_multi_gradient_single_color_is_plain_coloring() -> None:
    assert multi_gradient("ab", ["red"]) == _fg(255, 0, 0, "ab")


def test_multi_gradient_without_colors_returns_text() -> None:
    assert multi_gradient("ab", []) == "ab"


def test_multi_gradient_rejects_unknown_distribution() -> None:
    with pytest.raises(ValueError, match="distribution"):
        multi_gradient("ab", ["red", "blue"], distribution="random")  # type: ignore[arg-type]


def test_blend_mixes_two_colors() -> None:
    assert blend("#000000", "#ffffff").ops == (TrueColorOp(Layer.FG, Rgb(128, 128, 128)),)


def test_highlight_picks_dark_ink_on_light_background() -> None:
    assert highlight("hi", "#ffffff") == "\x1b[48;2;255;255;255m\x1b[38;2;0;0;0mhi\x1b[0m"


def test_highlight_picks_light_ink_on_dark_background() -> None:
    assert highlight("hi", "#000000") == "\x1b[48;2;0;0;0m\x1b[38;2;255;255;255mhi\x1b[0m"


def test_highlight_padding_and_border() -> None:
    result = highlight("hi", "#000000", padding=1, border=True, border_color="#ff0000")
    lines = result.split("\n")

    assert len(lines) == 3
    assert lines[0] == lines[2] == "\x1b[48;2;255;0;0m    \x1b[0m"
    assert strip_ansi(lines[1]) == " hi "


def test_color_wrap_keeps_lines_separate() -> None:
    result = color_wrap("a\nb", re.bg_hex("#000000"), re.hex("#ffffff"))

    assert result == (
        "\x1b[48;2;0;0;0m\x1b[38;2;255;255;255ma\x1b[0m\n"
        "\x1b[48;2;0;0;0m\x1b[38;2;255;255;255mb\x1b[0m"
    )


def test_safe_helpers_return_formatter_without_text() -> None:
    assert isinstance(safe_bg("red"), Formatter)
    assert isinstance(safe_color("black", "white"), Formatter)
    assert safe_bg("red", "x") == "\x1b[48;2;255;0;0mx\x1b[0m"
    assert safe_color("black", "white", "x") == (
        "\x1b[48;2;0;0;0m\x1b[38;2;255;255;255mx\x1b[0m"
    )


def test_auto_contrast_keeps_passing_color() -> None:
    assert auto_contrast("#000000").ops == (TrueColorOp(Layer.FG, Rgb(0, 0, 0)),)


def test_link_wraps_text_in_osc8() -> None:
    result = link("docs", "https://example.com/a_(b)")

    assert result.startswith("\x1b]8;;https://example.com/a_(b%29\x1b\\")
    assert result.endswith("\x1b]8;;\x1b\\")
    assert _fg(0, 0, 255, "docs") in result
    assert strip_ansi(result) == "docs"


def test_colorize_json_only_adds_escapes() -> None:
    payload = {"name": "relico", "ok": True, "missing": None, "count": -1.5, "tags": ["a"]}

    colored = colorize_json(payload)

    assert strip_ansi(colored) == json.dumps(payload, indent=2)
    assert '\x1b[38;2;0;255;255m"name"\x1b[0m:' in colored
    assert '\x1b[38;2;0;255;0m"relico"\x1b[0m' in colored
    assert "\x1b[38;2;255;255;0mtrue\x1b[0m" in colored
    assert "\x1b[38;2;255;0;255m-1.5\x1b[0m" in colored


def test_colorize_json_compact() -> None:
    assert strip_ansi(colorize_json({"a": 1}, compact=True)) == '{"a":1}'


def test_color_scheme_accent_is_complementary() -> None:
    scheme = create_color_scheme("red")

    assert scheme.base.ops == (TrueColorOp(Layer.FG, Rgb(255, 0, 0)),)
    assert scheme.accent.ops == (TrueColorOp(Layer.FG, Rgb(0, 255, 255)),)
    assert scheme.bg.ops[0].layer is Layer.BG


def test_effects_are_plain_at_level_zero() -> None:
    set_color_level(0)

    assert rainbow("abc") == "abc"
    assert gradient("abc", "red", "blue") == "abc"
    assert highlight("hi", "#ffffff", padding=2) == "hi"
    assert link("docs", "https://example.com") == "docs"
    assert colorize_json({"a": 1}) == json.dumps({"a": 1}, indent=2)
    assert safe_bg("red", "x") == "x"


def test_contrast_helpers_follow_the_active_theme() -> None:
    configure(theme="secondary")

    assert check_contrast("red").foreground == "#ff5555"
    assert get_accessible_color("red", "black") == "#ff5555"


def test_contrast_helpers_see_custom_colors() -> None:
    configure(custom_colors={"brand": ("#123456", "#123456")})

    report = check_contrast("brand", "white")

    assert report.foreground == "#123456"
    assert report.background == "#ffffff"
    assert get_accessible_color("brand", "#ffffff") == "#123456"


def test_contrast_helpers_raise_in_strict_mode() -> None:
    configure(strict=True)

    with pytest.raises(InvalidColorError):
        check_contrast("nope")
    with pytest.raises(InvalidColorError):
        get_accessible_color("nope")
    with pytest.raises(InvalidColorError):
        auto_contrast("#000000", "nope")


def test_package_exports_palette_aware_contrast() -> None:
    assert relico.check_contrast is check_contrast
    assert relico.get_accessible_color is get_accessible_color
