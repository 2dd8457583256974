"""Chainable, immutable text formatters.

`re` is the empty root formatter. Attribute access appends operations:
`re.bold.red("x")`, `re.bgBlue.white("x")` or `re.bg_blue.white("x")`.
Every extension returns a new formatter; formatters are interned by their
operation tuple, so equal chains share one object until the next
invalidation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relico.lib.apply import apply_ops
from relico.lib.cache import memo_table
from relico.lib.color.convert import Rgb, hsl_to_rgb, normalize
from relico.lib.color.names import BASE_COLORS, STYLE_CODES
from relico.lib.config.runtime import get_palette, is_strict
from relico.lib.errors import UnknownStyleError
from relico.lib.palette import camel_case
from relico.lib.sgr.ops import Ansi256ColorOp, Operation, OperationList, TrueColorOp
from relico.lib.types import Layer

if TYPE_CHECKING:
    from collections.abc import Iterable

_formatters = memo_table("formatters")
_resolved_names = memo_table("style-names")
_parsed_colors = memo_table("parsed-colors")


def _intern(ops: OperationList) -> Formatter:
    return _formatters.get_or_create(ops, lambda: Formatter(ops))


def _resolve(name: str) -> OperationList | None:
    return _resolved_names.get_or_create(name, lambda: get_palette().resolve(name))


def _parse(value: object) -> Rgb:
    strict = is_strict()
    if not isinstance(value, str):
        return normalize(value, strict=strict, named=get_palette().named_hex)
    key = value.strip().lower()
    return _parsed_colors.get_or_create(
        (key, strict),
        lambda: normalize(key, strict=strict, named=get_palette().named_hex),
    )


class Formatter:
    """Callable wrapper around an immutable operation tuple."""

    __slots__ = ("_ops",)

    def __init__(self, ops: Iterable[Operation] = ()) -> None:
        self._ops: OperationList = tuple(ops)

    @property
    def ops(self) -> OperationList:
        return self._ops

    def __call__(self, text: object) -> str:
        return apply_ops(self._ops, text)

    def __repr__(self) -> str:
        return f"Formatter({list(self._ops)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formatter):
            return NotImplemented
        return self._ops == other._ops

    def __hash__(self) -> int:
        return hash(self._ops)

    def __getattr__(self, name: str) -> Formatter:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.style(name)

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(STYLE_CODES)
        names.update(BASE_COLORS)
        names.update(f"bg{name.capitalize()}" for name in BASE_COLORS)
        return sorted(names)

    def extend(self, ops: Iterable[Operation]) -> Formatter:
        added = tuple(ops)
        if not added:
            return self
        return _intern(self._ops + added)

    def style(self, name: str) -> Formatter:
        """Append the style or color called `name`.

        Unknown names leave the formatter unchanged, or raise
        `UnknownStyleError` in strict mode.
        """

        ops = _resolve(camel_case(name))
        if ops is None:
            if is_strict():
                raise UnknownStyleError(name)
            return self
        return self.extend(ops)

    def _color(self, layer: Layer, rgb: Rgb) -> Formatter:
        return self.extend((TrueColorOp(layer, rgb),))

    def rgb(self, r: float, g: float, b: float) -> Formatter:
        return self._color(Layer.FG, Rgb(r, g, b))

    def bg_rgb(self, r: float, g: float, b: float) -> Formatter:
        return self._color(Layer.BG, Rgb(r, g, b))

    def hex(self, value: str) -> Formatter:
        return self._color(Layer.FG, _parse(value))

    def bg_hex(self, value: str) -> Formatter:
        return self._color(Layer.BG, _parse(value))

    def hsl(self, h: float, s: float, l: float) -> Formatter:  # noqa: E741
        return self._color(Layer.FG, hsl_to_rgb(h, s, l))

    def bg_hsl(self, h: float, s: float, l: float) -> Formatter:  # noqa: E741
        return self._color(Layer.BG, hsl_to_rgb(h, s, l))

    def color(self, value: object) -> Formatter:
        """Foreground from any color input: name, hex, `Rgb`, `Hsl` or triple."""

        return self._color(Layer.FG, _parse(value))

    def bg_color(self, value: object) -> Formatter:
        return self._color(Layer.BG, _parse(value))

    def ansi256(self, code: int) -> Formatter:
        return self.extend((Ansi256ColorOp(Layer.FG, max(0, min(255, int(code)))),))

    def bg_ansi256(self, code: int) -> Formatter:
        return self.extend((Ansi256ColorOp(Layer.BG, max(0, min(255, int(code)))),))

    bgRgb = bg_rgb  # noqa: N815
    bgHex = bg_hex  # noqa: N815
    bgHsl = bg_hsl  # noqa: N815
    bgColor = bg_color  # noqa: N815
    bgAnsi256 = bg_ansi256  # noqa: N815


re = Formatter()


def chain(*formatters: Formatter) -> Formatter:
    """Concatenate the operations of `formatters` in argument order."""

    ops: list[Operation] = []
    for item in formatters:
        if not isinstance(item, Formatter):
            raise TypeError(f"chain() expects Formatter arguments, got {type(item).__name__}.")
        ops.extend(item.ops)
    return _intern(tuple(ops))


def rgb(r: float, g: float, b: float) -> Formatter:
    return re.rgb(r, g, b)


def bg_rgb(r: float, g: float, b: float) -> Formatter:
    return re.bg_rgb(r, g, b)


def hex(value: str) -> Formatter:  # noqa: A001
    return re.hex(value)


def bg_hex(value: str) -> Formatter:
    return re.bg_hex(value)


def hsl(h: float, s: float, l: float) -> Formatter:  # noqa: E741
    return re.hsl(h, s, l)


def bg_hsl(h: float, s: float, l: float) -> Formatter:  # noqa: E741
    return re.bg_hsl(h, s, l)


def resolve_color(value: object) -> Rgb:
    """Resolve a color input against the active palette (strict-mode aware)."""

    return _parse(value)
