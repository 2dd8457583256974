"""Shared enums for capability levels, color layers and themes."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ColorLevel(IntEnum):
    """How rich emitted escape sequences may be."""

    OFF = 0
    BASIC = 1
    ANSI256 = 2
    TRUECOLOR = 3

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_LEVEL_LABELS: dict[ColorLevel, str] = {
    ColorLevel.OFF: "disabled",
    ColorLevel.BASIC: "16 colors",
    ColorLevel.ANSI256: "256 colors",
    ColorLevel.TRUECOLOR: "truecolor",
}


class Layer(StrEnum):
    FG = "fg"
    BG = "bg"


class Theme(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
