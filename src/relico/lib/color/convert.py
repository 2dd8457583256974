"""Color representations and conversions between them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

from relico.lib.color.names import DEFAULT_NAMED_HEX
from relico.lib.errors import InvalidColorError

if TYPE_CHECKING:
    from collections.abc import Mapping

MIN_BYTE: Final = 0
MAX_BYTE: Final = 255

_HEX_DIGITS: Final = frozenset("0123456789abcdef")
_HEX_LENGTHS: Final = frozenset({3, 4, 6, 8})

# Standard xterm anchors for black, red, green, yellow, blue, magenta, cyan, white.
BASIC8: Final[tuple[tuple[int, int, int], ...]] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
)

# Bright halves of the 16-color palette, used to map codes 8..15 back to RGB.
_BRIGHT8: Final[tuple[tuple[int, int, int], ...]] = (
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

_CUBE_STEPS: Final = (0, 95, 135, 175, 215, 255)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like terminal tooling does."""

    return math.floor(value + 0.5)


def clamp_byte(value: float) -> int:
    """Clamp one channel into [0, 255]; non-finite input becomes 0."""

    # Ints past float range would overflow isfinite().
    if isinstance(value, int):
        return max(MIN_BYTE, min(MAX_BYTE, int(value)))
    if not math.isfinite(value):
        return MIN_BYTE
    if value < MIN_BYTE:
        return MIN_BYTE
    if value > MAX_BYTE:
        return MAX_BYTE
    return round_half_up(value)


@dataclass(frozen=True, slots=True)
class Rgb:
    """24-bit color; channels are always clamped integers."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", clamp_byte(self.r))
        object.__setattr__(self, "g", clamp_byte(self.g))
        object.__setattr__(self, "b", clamp_byte(self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def is_gray(self) -> bool:
        return self.r == self.g == self.b


@dataclass(frozen=True, slots=True)
class Hsl:
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741


BLACK: Final = Rgb(0, 0, 0)
WHITE: Final = Rgb(255, 255, 255)

ColorInput: TypeAlias = str | Rgb | Hsl | tuple[float, float, float]


def parse_hex(value: str) -> Rgb | None:
    """Parse `#rgb`, `#rgba`, `#rrggbb` or `#rrggbbaa`; alpha is ignored."""

    digits = value.strip().lower().removeprefix("#")
    if len(digits) not in _HEX_LENGTHS or not set(digits) <= _HEX_DIGITS:
        return None
    if len(digits) in {3, 4}:
        digits = "".join(ch * 2 for ch in digits)
    return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: Rgb) -> str:
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to RGB."""

    h = h % 360
    s = max(0.0, min(100.0, s)) / 100
    l = max(0.0, min(100.0, l)) / 100  # noqa: E741

    if s == 0:
        gray = l * 255
        return Rgb(gray, gray, gray)

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Rgb((r + m) * 255, (g + m) * 255, (b + m) * 255)


def rgb_to_hsl(rgb: Rgb) -> Hsl:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    if high == low:
        return Hsl(0.0, 0.0, lightness * 100)

    d = high - low
    saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
    if high == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    return Hsl(hue * 60, saturation * 100, lightness * 100)


def mix_with_white(rgb: Rgb, factor: float) -> Rgb:
    """Move `rgb` toward white by `factor` (0 = unchanged, 1 = white)."""

    return blend_rgb(rgb, WHITE, factor)


def blend_rgb(first: Rgb, second: Rgb, ratio: float) -> Rgb:
    ratio = max(0.0, min(1.0, ratio))
    return Rgb(
        first.r * (1 - ratio) + second.r * ratio,
        first.g * (1 - ratio) + second.g * ratio,
        first.b * (1 - ratio) + second.b * ratio,
    )


def nearest_basic_index(rgb: Rgb) -> int:
    """Index 0..7 of the closest BASIC8 anchor; ties keep the lowest index."""

    best = 0
    best_distance = math.inf
    for index, (ar, ag, ab) in enumerate(BASIC8):
        distance = (ar - rgb.r) ** 2 + (ag - rgb.g) ** 2 + (ab - rgb.b) ** 2
        if distance < best_distance:
            best_distance = distance
            best = index
    return best


def rgb_to_ansi256(rgb: Rgb) -> int:
    """Map to the 6x6x6 cube or the 24-step grayscale ramp (16..255)."""

    if rgb.is_gray:
        if rgb.r < 8:
            return 16
        if rgb.r > 248:
            return 231
        return 232 + round_half_up((rgb.r - 8) / 247 * 24)

    r5 = round_half_up(rgb.r / 255 * 5)
    g5 = round_half_up(rgb.g / 255 * 5)
    b5 = round_half_up(rgb.b / 255 * 5)
    return 16 + 36 * r5 + 6 * g5 + b5


def ansi256_to_rgb(code: int) -> Rgb:
    """Approximate RGB for a 256-color palette code."""

    code = max(0, min(255, int(code)))
    if code < 8:
        return Rgb(*BASIC8[code])
    if code < 16:
        return Rgb(*_BRIGHT8[code - 8])
    if code >= 232:
        gray = 8 + 10 * (code - 232)
        return Rgb(gray, gray, gray)
    offset = code - 16
    return Rgb(
        _CUBE_STEPS[offset // 36],
        _CUBE_STEPS[(offset // 6) % 6],
        _CUBE_STEPS[offset % 6],
    )


def parse_color(value: object, named: Mapping[str, str]) -> Rgb | None:
    """Resolve a color input to RGB, or None when it is malformed."""

    if isinstance(value, Rgb):
        return value
    if isinstance(value, Hsl):
        return hsl_to_rgb(value.h, value.s, value.l)
    if isinstance(value, tuple | list):
        if len(value) != 3 or not all(
            isinstance(channel, int | float) and not isinstance(channel, bool)
            for channel in value
        ):
            return None
        return Rgb(*value)
    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    if not key:
        return None
    named_hex = named.get(key)
    if named_hex is not None:
        return parse_hex(named_hex)
    return parse_hex(key)


def normalize(
    value: object,
    *,
    strict: bool = False,
    named: Mapping[str, str] | None = None,
) -> Rgb:
    """Resolve any color input to RGB; malformed input becomes black."""

    if named is None:
        named = DEFAULT_NAMED_HEX
    rgb = parse_color(value, named)
    if rgb is not None:
        return rgb
    if strict:
        raise InvalidColorError(value)
    return BLACK
