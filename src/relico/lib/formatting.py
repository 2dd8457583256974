"""Text rendering hooks shared by report dataclasses and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    # Palette listings draw a colored swatch before each name.
    swatches: bool = True
    verbosity: int = 0


@runtime_checkable
class TextFormattable(Protocol):
    """Anything the CLI can print without falling back to JSON."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...
