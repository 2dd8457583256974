"""CLI command handlers for info.* operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from relico.lib.color.contrast import AA
from relico.lib.ops.info import (
    ContrastInput,
    PaletteInput,
    SupportInput,
    contrast_sync,
    palette_sync,
    support_sync,
)
from relico.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]


def _contrast(
    emit: Emitter,
    foreground: str,
    background: str = "#ffffff",
    target: Annotated[float, Parameter(name="--target", help="Ratio to suggest a fix for.")] = AA,
) -> None:
    emit(contrast_sync(ContrastInput(foreground=foreground, background=background, target_ratio=target)))


def _palette(
    emit: Emitter,
    theme: Annotated[
        str | None,
        Parameter(name="--theme", help="Theme to list: primary or secondary."),
    ] = None,
) -> None:
    emit(palette_sync(PaletteInput(theme=theme)))


def _support(emit: Emitter) -> None:
    emit(support_sync(SupportInput()))


def register_info_commands(app: App, emit: Emitter) -> tuple[set[str], dict[str, str]]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "info.contrast": lambda: partial(_contrast, emit),
        "info.palette": lambda: partial(_palette, emit),
        "info.support": lambda: partial(_support, emit),
    }

    registered: set[str] = set()
    descriptions: dict[str, str] = {}

    for op in get_all_operations():
        if op.cli_group != "info":
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
