"""Color parsing, conversion and palette-mapping helpers."""

from __future__ import annotations

import math

import pytest

from relico.lib.color.convert import (
    BASIC8,
    BLACK,
    Hsl,
    Rgb,
    ansi256_to_rgb,
    blend_rgb,
    hsl_to_rgb,
    mix_with_white,
    nearest_basic_index,
    normalize,
    parse_hex,
    rgb_to_ansi256,
    rgb_to_hex,
    rgb_to_hsl,
)
from relico.lib.errors import InvalidColorError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param("#abc", Rgb(0xAA, 0xBB, 0xCC), id="short"),
        pytest.param("abc", Rgb(0xAA, 0xBB, 0xCC), id="short-no-hash"),
        pytest.param("#abcd", Rgb(0xAA, 0xBB, 0xCC), id="short-alpha"),
        pytest.param("#FF8000", Rgb(255, 128, 0), id="upper"),
        pytest.param("#aabbccdd", Rgb(0xAA, 0xBB, 0xCC), id="long-alpha"),
    ],
)
def test_parse_hex_accepts_supported_lengths(value: str, expected: Rgb) -> None:
    assert parse_hex(value) == expected


@pytest.mark.parametrize("value", ["", "#12345", "#ggg", "red", "#1234567"])
def test_parse_hex_rejects_malformed_input(value: str) -> None:
    assert parse_hex(value) is None


def test_rgb_clamps_and_rounds_channels() -> None:
    assert Rgb(-10, 300, 128) == Rgb(0, 255, 128)
    assert Rgb(12.5, 0.49, 254.5) == Rgb(13, 0, 255)
    assert Rgb(math.nan, math.inf, 7) == Rgb(0, 0, 7)


def test_rgb_clamps_ints_beyond_float_range() -> None:
    huge = 10**400

    assert Rgb(huge, -huge, 128) == Rgb(255, 0, 128)
    assert Rgb(huge, 0, 0).as_tuple() == (255, 0, 0)


def test_normalize_falls_back_to_black_for_malformed_input() -> None:
    assert normalize("not-a-color") == BLACK
    assert normalize(None) == BLACK
    assert normalize((True, 0, 0)) == BLACK
    assert normalize((1, 2)) == BLACK


def test_normalize_strict_raises_invalid_color() -> None:
    with pytest.raises(InvalidColorError) as exc_info:
        normalize("not-a-color", strict=True)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.value == "not-a-color"


def test_normalize_accepts_names_triples_and_hsl() -> None:
    assert normalize("Red") == Rgb(255, 0, 0)
    assert normalize("coral") == Rgb(255, 127, 80)
    assert normalize((300, -5, 12.5)) == Rgb(255, 0, 13)
    assert normalize([0, 128, 255]) == Rgb(0, 128, 255)
    assert normalize(Hsl(120, 100, 50)) == Rgb(0, 255, 0)
    assert normalize(Rgb(1, 2, 3)) == Rgb(1, 2, 3)


@pytest.mark.parametrize(
    ("hsl", "expected"),
    [
        pytest.param((0, 100, 50), Rgb(255, 0, 0), id="red"),
        pytest.param((120, 100, 50), Rgb(0, 255, 0), id="green"),
        pytest.param((240, 100, 50), Rgb(0, 0, 255), id="blue"),
        pytest.param((480, 100, 50), Rgb(0, 255, 0), id="hue-wraps"),
        pytest.param((-120, 100, 50), Rgb(0, 0, 255), id="negative-hue"),
        pytest.param((42, 0, 50), Rgb(128, 128, 128), id="achromatic"),
        pytest.param((0, 150, -10), Rgb(0, 0, 0), id="clamped"),
    ],
)
def test_hsl_to_rgb(hsl: tuple[float, float, float], expected: Rgb) -> None:
    assert hsl_to_rgb(*hsl) == expected


def test_rgb_to_hsl_inverts_primary_colors() -> None:
    assert rgb_to_hsl(Rgb(255, 0, 0)) == Hsl(0.0, 100.0, 50.0)
    cyan = rgb_to_hsl(Rgb(0, 255, 255))
    assert cyan.h == pytest.approx(180.0)
    gray = rgb_to_hsl(Rgb(128, 128, 128))
    assert gray.s == 0.0


def test_rgb_to_hex_is_lowercase_and_padded() -> None:
    assert rgb_to_hex(Rgb(0, 10, 255)) == "#000aff"


@pytest.mark.parametrize("index", range(8))
def test_nearest_basic_index_returns_anchor_index(index: int) -> None:
    assert nearest_basic_index(Rgb(*BASIC8[index])) == index


def test_grayscale_ramp_endpoints_and_monotonicity() -> None:
    assert rgb_to_ansi256(Rgb(0, 0, 0)) == 16
    assert rgb_to_ansi256(Rgb(255, 255, 255)) == 231

    codes = [rgb_to_ansi256(Rgb(r, r, r)) for r in range(8, 249)]
    assert codes == sorted(codes)
    assert all(232 <= code <= 255 for code in codes)


def test_color_cube_mapping() -> None:
    assert rgb_to_ansi256(Rgb(255, 0, 0)) == 196
    assert rgb_to_ansi256(Rgb(0, 0, 255)) == 21
    assert rgb_to_ansi256(Rgb(0, 255, 0)) == 46


def test_ansi256_to_rgb_covers_every_region() -> None:
    assert ansi256_to_rgb(1) == Rgb(205, 0, 0)
    assert ansi256_to_rgb(9) == Rgb(255, 0, 0)
    assert ansi256_to_rgb(196) == Rgb(255, 0, 0)
    assert ansi256_to_rgb(232) == Rgb(8, 8, 8)
    assert ansi256_to_rgb(999) == Rgb(238, 238, 238)


def test_mixing_toward_white_and_blending() -> None:
    assert mix_with_white(Rgb(255, 0, 0), 0.25) == Rgb(255, 64, 64)
    assert mix_with_white(Rgb(255, 0, 0), 0.60) == Rgb(255, 153, 153)
    assert blend_rgb(Rgb(0, 0, 0), Rgb(255, 255, 255), 0.5) == Rgb(128, 128, 128)
    assert blend_rgb(Rgb(0, 0, 0), Rgb(255, 255, 255), 7) == Rgb(255, 255, 255)
