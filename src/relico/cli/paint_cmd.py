"""CLI command handlers for paint.* operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from relico.lib.ops.paint import (
    GradientInput,
    PaintInput,
    RainbowInput,
    gradient_sync,
    paint_sync,
    rainbow_sync,
)
from relico.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]


def _paint(
    emit: Emitter,
    text: str,
    styles: Annotated[
        tuple[str, ...],
        Parameter(name="--style", help="Style or color name to apply (repeatable).", negative_iterable=()),
    ] = (),
    fg: Annotated[
        str | None,
        Parameter(name="--fg", help="Foreground color: name, hex or web color."),
    ] = None,
    bg: Annotated[
        str | None,
        Parameter(name="--bg", help="Background color: name, hex or web color."),
    ] = None,
) -> None:
    emit(paint_sync(PaintInput(text=text, styles=styles, color=fg, bg=bg)))


def _rainbow(
    emit: Emitter,
    text: str,
    saturation: Annotated[float, Parameter(name="--saturation", help="Saturation, 0-100.")] = 100,
    lightness: Annotated[float, Parameter(name="--lightness", help="Lightness, 0-100.")] = 50,
    start_hue: Annotated[float, Parameter(name="--start-hue", help="First hue in degrees.")] = 0,
    end_hue: Annotated[float, Parameter(name="--end-hue", help="Last hue in degrees.")] = 360,
) -> None:
    emit(
        rainbow_sync(
            RainbowInput(
                text=text,
                saturation=saturation,
                lightness=lightness,
                start_hue=start_hue,
                end_hue=end_hue,
            )
        )
    )


def _gradient(
    emit: Emitter,
    text: str,
    *colors: str,
    smoothing: Annotated[float, Parameter(name="--smoothing", help="Weighted-mode exponent.")] = 1.0,
    distribution: Annotated[
        str,
        Parameter(name="--distribution", help="Color stop spacing: even or weighted."),
    ] = "even",
) -> None:
    emit(
        gradient_sync(
            GradientInput(
                text=text,
                colors=colors,
                smoothing=smoothing,
                distribution=distribution,
            )
        )
    )


def register_paint_commands(app: App, emit: Emitter) -> tuple[set[str], dict[str, str]]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "paint.text": lambda: partial(_paint, emit),
        "paint.rainbow": lambda: partial(_rainbow, emit),
        "paint.gradient": lambda: partial(_gradient, emit),
    }

    registered: set[str] = set()
    descriptions: dict[str, str] = {}

    for op in get_all_operations():
        if op.cli_group != "paint":
            continue
        handler_factory = handlers.get(op.name)
        if handler_factory is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = handler_factory()
        handler.__name__ = f"cmd_{op.cli_group}_{op.cli_name}"  # type: ignore[attr-defined]
        app.command(handler, name=op.cli_name, help=op.description)
        registered.add(op.cli_name)
        descriptions[op.name] = op.description

    return registered, descriptions
