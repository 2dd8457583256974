"""Immutable SGR operations.

Named, hex, RGB and HSL requests become `TrueColorOp`s. The escape builder
lowers them to whatever the current level supports when text is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass

from relico.lib.color.convert import Rgb
from relico.lib.types import Layer


@dataclass(frozen=True, slots=True)
class StyleOp:
    codes: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class BasicColorOp:
    layer: Layer
    index: int
    bright: bool = False


@dataclass(frozen=True, slots=True)
class Ansi256ColorOp:
    layer: Layer
    code: int


@dataclass(frozen=True, slots=True)
class TrueColorOp:
    layer: Layer
    rgb: Rgb
    # Selects the 90/100 SGR range when lowered to 16 colors.
    bright: bool = False


Operation: TypeAlias = StyleOp | BasicColorOp | Ansi256ColorOp | TrueColorOp
OperationList: TypeAlias = tuple[Operation, ...]


def fg(rgb: Rgb, *, bright: bool = False) -> TrueColorOp:
    return TrueColorOp(Layer.FG, rgb, bright)


def bg(rgb: Rgb, *, bright: bool = False) -> TrueColorOp:
    return TrueColorOp(Layer.BG, rgb, bright)
