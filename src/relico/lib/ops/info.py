"""Read-only inspection operations: contrast, palette and terminal support."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relico.lib.color.contrast import AA, ContrastReport
from relico.lib.color.convert import rgb_to_hex
from relico.lib.config.runtime import get_config, get_palette
from relico.lib.detect import ColorSupport, color_support
from relico.lib.effects import check_contrast, get_accessible_color
from relico.lib.formatter import re
from relico.lib.ops.registry import OperationSpec, operation
from relico.lib.palette import Palette
from relico.lib.types import Theme

if TYPE_CHECKING:
    from relico.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class ContrastInput:
    foreground: str = ""
    background: str = "#ffffff"
    target_ratio: float = AA


@dataclass(frozen=True, slots=True)
class ContrastOutput:
    report: ContrastReport
    target_ratio: float
    # Present only when the pair misses the target ratio.
    suggestion: str | None = None

    def format_text(self, ctx: FormatContext | None = None) -> str:
        text = self.report.format_text(ctx)
        if self.suggestion is None:
            return text
        return f"{text}\nSuggested foreground: {self.suggestion}"


@dataclass(frozen=True, slots=True)
class PaletteInput:
    theme: str | None = None


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    name: str
    hex: str


@dataclass(frozen=True, slots=True)
class PaletteOutput:
    theme: Theme
    entries: tuple[PaletteEntry, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        swatches = ctx is None or ctx.swatches
        width = max((len(entry.name) for entry in self.entries), default=0)
        lines = [f"Theme: {self.theme}"]
        for entry in self.entries:
            row = f"{entry.name.ljust(width)}  {re.hex(entry.hex)(entry.hex)}"
            if swatches:
                row = f"{re.bg_hex(entry.hex)('  ')} {row}"
            lines.append(row)
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class SupportInput:
    pass


def contrast_sync(payload: ContrastInput) -> ContrastOutput:
    if not payload.foreground.strip():
        raise ValueError("contrast requires a foreground color.")
    report = check_contrast(payload.foreground, payload.background)
    suggestion = None
    if report.ratio < payload.target_ratio:
        suggestion = get_accessible_color(payload.foreground, payload.background, payload.target_ratio)
    return ContrastOutput(report=report, target_ratio=payload.target_ratio, suggestion=suggestion)


def palette_sync(payload: PaletteInput) -> PaletteOutput:
    palette = get_palette()
    if payload.theme is not None:
        try:
            theme = Theme(payload.theme.strip().lower())
        except ValueError as error:
            raise ValueError(
                f"Invalid theme {payload.theme!r}: expected 'primary' or 'secondary'."
            ) from error
        if theme != palette.theme:
            palette = Palette(theme, get_config().custom_colors)
    entries = tuple(
        PaletteEntry(name=name, hex=rgb_to_hex(rgb)) for name, rgb in palette.base_colors().items()
    )
    return PaletteOutput(theme=palette.theme, entries=entries)


def support_sync(payload: SupportInput) -> ColorSupport:
    _ = payload
    return color_support()


operation(
    OperationSpec(
        name="info.contrast",
        handler=contrast_sync,
        input_type=ContrastInput,
        output_type=ContrastOutput,
        cli_group="info",
        cli_name="contrast",
        description="Check WCAG contrast between two colors.",
    )
)

operation(
    OperationSpec(
        name="info.palette",
        handler=palette_sync,
        input_type=PaletteInput,
        output_type=PaletteOutput,
        cli_group="info",
        cli_name="palette",
        description="List the base palette for a theme.",
    )
)

operation(
    OperationSpec(
        name="info.support",
        handler=support_sync,
        input_type=SupportInput,
        output_type=ColorSupport,
        cli_group="info",
        cli_name="support",
        description="Report detected terminal color support.",
    )
)
