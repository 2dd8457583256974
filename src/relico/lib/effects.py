"""Composite effects built on formatters: gradients, highlights, links, JSON.

The contrast helpers here resolve names against the active palette and honor
strict mode; `relico.lib.color.contrast` holds the palette-free versions.

Every effect returns plain text while the color level is OFF.
"""

from __future__ import annotations

import json
import re as regex
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Literal, TypeAlias

from relico.lib.color import contrast
from relico.lib.color.contrast import AA, ContrastReport, relative_luminance
from relico.lib.color.convert import Rgb, blend_rgb, rgb_to_hsl
from relico.lib.config.runtime import get_palette, is_strict
from relico.lib.formatter import Formatter, chain, re, resolve_color
from relico.lib.level import get_color_level
from relico.lib.types import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

Distribution: TypeAlias = Literal["even", "weighted"]

_DISTRIBUTIONS: Final = frozenset({"even", "weighted"})

_OSC8_OPEN: Final = "\x1b]8;;"
_OSC8_TERMINATOR: Final = "\x1b\\"

_JSON_TOKEN: Final = regex.compile(
    r'(?P<string>"(?:\\.|[^"\\])*")(?P<colon>\s*:)?'
    r"|(?P<literal>\b(?:true|false|null)\b)"
    r"|(?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)"
)


def _disabled() -> bool:
    return get_color_level() == ColorLevel.OFF


def blend(first: object, second: object, ratio: float = 0.5) -> Formatter:
    """Foreground formatter for the mix of two colors (0 = first, 1 = second)."""

    return re.rgb(*blend_rgb(resolve_color(first), resolve_color(second), ratio).as_tuple())


def rainbow(
    text: object,
    saturation: float = 100,
    lightness: float = 50,
    start_hue: float = 0,
    end_hue: float = 360,
) -> str:
    """Color each character with a hue stepped evenly from start to end."""

    value = str(text)
    if _disabled() or not value:
        return value

    hue_range = end_hue - start_hue
    step = hue_range / (len(value) - 1) if len(value) > 1 else 0
    return "".join(
        re.hsl((start_hue + index * step) % 360, saturation, lightness)(char)
        for index, char in enumerate(value)
    )


def multi_gradient(
    text: object,
    colors: Sequence[object],
    smoothing: float = 1.0,
    distribution: Distribution = "even",
) -> str:
    """Interpolate per character through `colors`.

    `weighted` distribution raises each position to the power `smoothing`
    before picking the segment, pushing the change toward the end.
    """

    if distribution not in _DISTRIBUTIONS:
        raise ValueError(
            f"Invalid distribution {distribution!r}: expected one of {sorted(_DISTRIBUTIONS)}."
        )
    value = str(text)
    if _disabled() or not colors or not value:
        return value
    if len(colors) == 1:
        return re.color(colors[0])(value)

    stops = [resolve_color(color) for color in colors]
    segments = len(stops) - 1
    last = len(value) - 1
    pieces: list[str] = []
    for index, char in enumerate(value):
        position = index / last if last > 0 else 0.0
        if distribution == "weighted":
            position **= smoothing
        scaled = position * segments
        segment = min(int(scaled), segments - 1)
        mixed = blend_rgb(stops[segment], stops[segment + 1], scaled - segment)
        pieces.append(re.rgb(*mixed.as_tuple())(char))
    return "".join(pieces)


def gradient(text: object, start: object, end: object, smoothing: float = 1.0) -> str:
    return multi_gradient(text, [start, end], smoothing=smoothing, distribution="weighted")


def color_wrap(text: object, background: Formatter, foreground: Formatter | None = None) -> str:
    """Apply a background (and optional foreground) line by line."""

    value = str(text)
    if _disabled():
        return value
    if foreground is None:
        return background(value)
    return chain(background, foreground)(value)


def safe_bg(color: object, text: object | None = None) -> Formatter | str:
    """Background formatter for `color`, or `text` already wrapped in it."""

    formatter = re.bg_color(color)
    if text is None:
        return formatter
    return color_wrap(text, formatter)


def safe_color(background: object, foreground: object, text: object | None = None) -> Formatter | str:
    formatter = chain(re.bg_color(background), re.color(foreground))
    if text is None:
        return formatter
    return color_wrap(text, formatter)


def check_contrast(foreground: object, background: object = "#ffffff") -> ContrastReport:
    """WCAG report with both colors resolved against the active palette."""

    return contrast.check_contrast(
        foreground,
        background,
        named=get_palette().named_hex,
        strict=is_strict(),
    )


def get_accessible_color(
    color: object,
    background: object = "#ffffff",
    target_ratio: float = AA,
) -> str:
    return contrast.get_accessible_color(
        color,
        background,
        target_ratio,
        named=get_palette().named_hex,
        strict=is_strict(),
    )


def auto_contrast(color: object, background: object = "#ffffff", target_ratio: float = AA) -> Formatter:
    """Foreground formatter for `color` adjusted to reach `target_ratio`."""

    return re.hex(get_accessible_color(color, background, target_ratio))


@dataclass(frozen=True, slots=True)
class ColorScheme:
    base: Formatter
    light: Formatter
    dark: Formatter
    bright: Formatter
    pastel: Formatter
    bg: Formatter
    bg_light: Formatter
    accent: Formatter


def create_color_scheme(base: object) -> ColorScheme:
    """Related formatters derived from one color's hue, saturation and lightness."""

    rgb = resolve_color(base)
    hsl = rgb_to_hsl(rgb)
    h, s, l = hsl.h, hsl.s, hsl.l  # noqa: E741
    return ColorScheme(
        base=re.rgb(*rgb.as_tuple()),
        light=re.hsl(h, max(0.0, s - 10), min(100.0, l + 15)),
        dark=re.hsl(h, min(100.0, s + 10), max(0.0, l - 15)),
        bright=re.hsl(h, min(100.0, s + 20), min(95.0, l + 5)),
        pastel=re.hsl(h, max(0.0, s - 30), min(100.0, l + 20)),
        bg=re.bg_hsl(h, max(0.0, s - 10), min(100.0, l + 30)),
        bg_light=re.bg_hsl(h, max(0.0, s - 30), min(100.0, l + 40)),
        accent=re.hsl((h + 180) % 360, s, l),
    )


def highlight(
    text: object,
    background: object,
    padding: int = 0,
    border: bool = False,
    border_color: object | None = None,
) -> str:
    """Text on a background with black or white lettering, whichever reads better."""

    value = str(text)
    if _disabled():
        return value

    bg_rgb = resolve_color(background)
    ink = Rgb(0, 0, 0) if relative_luminance(bg_rgb) > 0.5 else Rgb(255, 255, 255)
    pad = " " * max(0, padding)
    lines = [f"{pad}{line}{pad}" for line in value.split("\n")]
    body = color_wrap("\n".join(lines), re.bg_rgb(*bg_rgb.as_tuple()), re.rgb(*ink.as_tuple()))
    if not border:
        return body

    edge = bg_rgb if border_color is None else resolve_color(border_color)
    width = max(len(line) for line in lines)
    border_line = re.bg_rgb(*edge.as_tuple())(" " * width)
    return f"{border_line}\n{body}\n{border_line}"


def link(text: object, url: str, color: object | None = None) -> str:
    """OSC 8 hyperlink; blue unless `color` is given."""

    value = str(text)
    if _disabled():
        return value
    formatter = re.blue if color is None else re.color(color)
    target = url.replace(")", "%29")
    return (
        f"{_OSC8_OPEN}{target}{_OSC8_TERMINATOR}"
        f"{formatter(value)}"
        f"{_OSC8_OPEN}{_OSC8_TERMINATOR}"
    )


def _colorize_token(match: regex.Match[str]) -> str:
    string = match.group("string")
    if string is not None:
        colon = match.group("colon")
        if colon is not None:
            return f"{re.cyan(string)}{colon}"
        return re.green(string)
    literal = match.group("literal")
    if literal is not None:
        return re.yellow(literal)
    return re.magenta(match.group("number"))


def colorize_json(obj: object, indent: int = 2, compact: bool = False) -> str:
    """Serialize `obj` as JSON with keys, strings, literals and numbers colored."""

    if compact:
        text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    else:
        text = json.dumps(obj, indent=indent, ensure_ascii=False)
    if _disabled():
        return text
    return _JSON_TOKEN.sub(_colorize_token, text)
