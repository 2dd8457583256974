"""WCAG contrast helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relico.lib.color.convert import Rgb, hsl_to_rgb, normalize, rgb_to_hex, rgb_to_hsl

if TYPE_CHECKING:
    from collections.abc import Mapping

    from relico.lib.formatting import FormatContext

AA_LARGE = 3.0
AA = 4.5
AAA = 7.0

_MAX_SEARCH_STEPS = 8


@dataclass(frozen=True, slots=True)
class ContrastReport:
    foreground: str
    background: str
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_aaa_large: bool

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        verdicts = [
            ("AA", self.passes_aa),
            ("AAA", self.passes_aaa),
            ("AA large", self.passes_aa_large),
            ("AAA large", self.passes_aaa_large),
        ]
        lines = [f"{self.foreground} on {self.background}: {self.ratio:.2f}:1"]
        lines.extend(f"  {label}: {'pass' if ok else 'fail'}" for label, ok in verdicts)
        return "\n".join(lines)


def _linear(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: Rgb) -> float:
    return 0.2126 * _linear(rgb.r) + 0.7152 * _linear(rgb.g) + 0.0722 * _linear(rgb.b)


def contrast_ratio(first: Rgb, second: Rgb) -> float:
    a = relative_luminance(first)
    b = relative_luminance(second)
    return (max(a, b) + 0.05) / (min(a, b) + 0.05)


def check_contrast(
    foreground: object,
    background: object = "#ffffff",
    *,
    named: Mapping[str, str] | None = None,
    strict: bool = False,
) -> ContrastReport:
    """Score a foreground/background pair against the WCAG thresholds.

    Names resolve against `named` (the primary table by default).
    """

    fg = normalize(foreground, strict=strict, named=named)
    bg = normalize(background, strict=strict, named=named)
    ratio = round(contrast_ratio(fg, bg), 2)
    return ContrastReport(
        foreground=rgb_to_hex(fg),
        background=rgb_to_hex(bg),
        ratio=ratio,
        passes_aa=ratio >= AA,
        passes_aaa=ratio >= AAA,
        passes_aa_large=ratio >= AA_LARGE,
        passes_aaa_large=ratio >= AA,
    )


def get_accessible_color(
    color: object,
    background: object = "#ffffff",
    target_ratio: float = AA,
    *,
    named: Mapping[str, str] | None = None,
    strict: bool = False,
) -> str:
    """Return `color` with its lightness adjusted to reach `target_ratio`.

    The search keeps hue and saturation, walks lightness by bisection for at
    most eight steps and returns the best candidate seen. Light backgrounds
    are matched by darkening, dark ones by lightening.
    """

    base = normalize(color, strict=strict, named=named)
    bg = normalize(background, strict=strict, named=named)
    best_ratio = round(contrast_ratio(base, bg), 2)
    if best_ratio >= target_ratio:
        return rgb_to_hex(base)

    hsl = rgb_to_hsl(base)
    darken = relative_luminance(bg) > 0.5
    low, high = (0.0, hsl.l) if darken else (hsl.l, 100.0)
    best_lightness = hsl.l

    for _ in range(_MAX_SEARCH_STEPS):
        lightness = (low + high) / 2
        candidate = hsl_to_rgb(hsl.h, hsl.s, lightness)
        ratio = round(contrast_ratio(candidate, bg), 2)
        if ratio > best_ratio:
            best_ratio = ratio
            best_lightness = lightness

        if abs(ratio - target_ratio) < 0.1 or abs(high - low) < 0.5:
            break

        too_low = ratio < target_ratio
        if too_low == darken:
            high = lightness
        else:
            low = lightness

    return rgb_to_hex(hsl_to_rgb(hsl.h, hsl.s, best_lightness))
