"""Theme-aware color name table and chain-property resolution."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from relico.lib.color.convert import BLACK, Rgb, mix_with_white, parse_color, round_half_up
from relico.lib.color.names import (
    BASE_COLORS,
    BRIGHT_MIX,
    DEFAULT_NAMED_HEX,
    GRAY_STEPS,
    PASTEL_MIX,
    STYLE_CODES,
    WEB_COLORS,
)
from relico.lib.sgr.ops import OperationList, StyleOp, bg, fg
from relico.lib.types import Theme

if TYPE_CHECKING:
    from collections.abc import Mapping

_GRAY_PATTERN: Final = re.compile(r"gray(\d{2})")
_BRIGHT_SUFFIX: Final = "bright"
_PASTEL_SUFFIX: Final = "pastel"


def camel_case(name: str) -> str:
    """`bg_red_bright` -> `bgRedBright`; names without underscores pass through."""

    if "_" not in name:
        return name
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class Palette:
    """Base colors for one theme, overlaid with custom colors and web names.

    A custom entry that replaces a base name also changes the derived `bg`,
    `Bright` and `Pastel` forms of that name, unless the derived name has a
    custom entry of its own.
    """

    def __init__(
        self,
        theme: Theme = Theme.PRIMARY,
        custom_colors: Mapping[str, tuple[str, str]] | None = None,
    ) -> None:
        column = 0 if theme == Theme.PRIMARY else 1
        named: dict[str, str] = dict(WEB_COLORS)
        named.update((name, pair[column]) for name, pair in BASE_COLORS.items())
        custom = custom_colors or {}
        named.update((name.lower(), pair[column]) for name, pair in custom.items())

        self.theme = theme
        self.custom_names = frozenset(name.lower() for name in custom)
        self.named_hex: Mapping[str, str] = MappingProxyType(named)

    def lookup(self, name: str) -> Rgb | None:
        """RGB of a base, custom or web color name (case-insensitive)."""

        value = self.named_hex.get(name.strip().lower())
        if value is None:
            return None
        return parse_color(value, DEFAULT_NAMED_HEX) or BLACK

    def color(self, name: str) -> tuple[Rgb, bool] | None:
        """Resolve a color name, including derived forms, to `(rgb, bright)`."""

        key = name.lower()
        direct = self.lookup(key)
        if direct is not None:
            return direct, key.endswith(_BRIGHT_SUFFIX)

        if key.endswith(_BRIGHT_SUFFIX):
            base = self.lookup(key.removesuffix(_BRIGHT_SUFFIX))
            if base is not None:
                return mix_with_white(base, BRIGHT_MIX), True
            return None
        if key.endswith(_PASTEL_SUFFIX):
            base = self.lookup(key.removesuffix(_PASTEL_SUFFIX))
            if base is not None:
                return mix_with_white(base, PASTEL_MIX), False
            return None

        match = _GRAY_PATTERN.fullmatch(key)
        if match is not None and int(match.group(1)) in GRAY_STEPS:
            channel = round_half_up(255 * int(match.group(1)) / 100)
            return Rgb(channel, channel, channel), False
        return None

    def resolve(self, name: str) -> OperationList | None:
        """Operations for a style, `bg`-prefixed color or color name."""

        code = STYLE_CODES.get(name)
        if code is not None:
            return (StyleOp((code,)),)

        if len(name) > 2 and name.startswith("bg") and name[2].isupper():
            background = self.color(name[2:])
            if background is not None:
                rgb, bright = background
                return (bg(rgb, bright=bright),)

        foreground = self.color(name)
        if foreground is not None:
            rgb, bright = foreground
            return (fg(rgb, bright=bright),)
        return None

    def base_colors(self) -> dict[str, Rgb]:
        """Base palette names in table order, with custom overrides applied."""

        resolved: dict[str, Rgb] = {}
        for name in (*BASE_COLORS, *sorted(self.custom_names - set(BASE_COLORS))):
            rgb = self.lookup(name)
            if rgb is not None:
                resolved[name] = rgb
        return resolved
