"""Text styling operations: paint, rainbow and gradient."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relico.lib.effects import multi_gradient, rainbow
from relico.lib.formatter import re
from relico.lib.level import get_color_level
from relico.lib.ops.registry import OperationSpec, operation
from relico.lib.types import ColorLevel

if TYPE_CHECKING:
    from relico.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class PaintInput:
    text: str = ""
    styles: tuple[str, ...] = ()
    color: str | None = None
    bg: str | None = None


@dataclass(frozen=True, slots=True)
class RainbowInput:
    text: str = ""
    saturation: float = 100
    lightness: float = 50
    start_hue: float = 0
    end_hue: float = 360


@dataclass(frozen=True, slots=True)
class GradientInput:
    text: str = ""
    colors: tuple[str, ...] = ()
    smoothing: float = 1.0
    distribution: str = "even"


@dataclass(frozen=True, slots=True)
class PaintOutput:
    text: str
    rendered: str
    level: ColorLevel

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return self.rendered


def paint_sync(payload: PaintInput) -> PaintOutput:
    formatter = re
    for name in payload.styles:
        formatter = formatter.style(name)
    if payload.color:
        formatter = formatter.color(payload.color)
    if payload.bg:
        formatter = formatter.bg_color(payload.bg)
    return PaintOutput(text=payload.text, rendered=formatter(payload.text), level=get_color_level())


def rainbow_sync(payload: RainbowInput) -> PaintOutput:
    rendered = rainbow(
        payload.text,
        saturation=payload.saturation,
        lightness=payload.lightness,
        start_hue=payload.start_hue,
        end_hue=payload.end_hue,
    )
    return PaintOutput(text=payload.text, rendered=rendered, level=get_color_level())


def gradient_sync(payload: GradientInput) -> PaintOutput:
    if not payload.colors:
        raise ValueError("gradient requires at least one color.")
    if payload.distribution not in {"even", "weighted"}:
        raise ValueError(
            f"Invalid distribution {payload.distribution!r}: expected 'even' or 'weighted'."
        )
    rendered = multi_gradient(
        payload.text,
        payload.colors,
        smoothing=payload.smoothing,
        distribution="weighted" if payload.distribution == "weighted" else "even",
    )
    return PaintOutput(text=payload.text, rendered=rendered, level=get_color_level())


operation(
    OperationSpec(
        name="paint.text",
        handler=paint_sync,
        input_type=PaintInput,
        output_type=PaintOutput,
        cli_group="paint",
        cli_name="paint",
        description="Style text with named styles and colors.",
    )
)

operation(
    OperationSpec(
        name="paint.rainbow",
        handler=rainbow_sync,
        input_type=RainbowInput,
        output_type=PaintOutput,
        cli_group="paint",
        cli_name="rainbow",
        description="Color each character along the hue wheel.",
    )
)

operation(
    OperationSpec(
        name="paint.gradient",
        handler=gradient_sync,
        input_type=GradientInput,
        output_type=PaintOutput,
        cli_group="paint",
        cli_name="gradient",
        description="Blend text through two or more colors.",
    )
)
