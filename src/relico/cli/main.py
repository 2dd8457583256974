"""Cyclopts CLI entry point for relico."""

from __future__ import annotations

import sys
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from relico import __version__
from relico.cli.config_cmd import register_config_commands
from relico.cli.info_cmd import register_info_commands
from relico.cli.output import OutputConfig, normalize_output_format
from relico.cli.output import emit as emit_output
from relico.cli.paint_cmd import register_paint_commands
from relico.lib.config import init_user_config
from relico.lib.types import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    color_level: ColorLevel | None = None
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _parse_level(raw: str) -> ColorLevel:
    try:
        return ColorLevel(int(raw.strip()))
    except ValueError:
        raise SystemExit("--level must be one of: 0, 1, 2, 3") from None


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    no_color = False
    force_color = False
    level: ColorLevel | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            cleaned.extend(argv[i:])
            break
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--no-color":
            no_color = True
            i += 1
            continue
        if arg == "--color":
            force_color = True
            i += 1
            continue
        if arg == "--level":
            if i + 1 >= len(argv):
                raise SystemExit("--level requires a value")
            level = _parse_level(argv[i + 1])
            i += 2
            continue
        if arg.startswith("--level="):
            level = _parse_level(arg.partition("=")[2])
            i += 1
            continue
        if arg in {"-v", "--verbose"}:
            verbosity += 1
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    if level is None and no_color:
        level = ColorLevel.OFF
    elif level is None and force_color:
        level = ColorLevel.TRUECOLOR

    return cleaned, GlobalOptions(
        output=OutputConfig(format=normalize_output_format(json_mode=json_mode)),
        color_level=level,
        verbosity=verbosity,
    )


app = App(
    name="relico",
    help="Terminal text styling: colors, gradients and contrast checks.",
    version=__version__,
    help_formatter="plain",
)


@app.default
def root(
    json_mode: Annotated[
        bool,
        Parameter(name="--json", help="Emit command output as JSON."),
    ] = False,
    no_color: Annotated[
        bool,
        Parameter(name="--no-color", help="Disable color output (level 0)."),
    ] = False,
    force_color: Annotated[
        bool,
        Parameter(name="--color", help="Force truecolor output (level 3)."),
    ] = False,
    level: Annotated[
        int | None,
        Parameter(name="--level", help="Color level: 0 off, 1 basic, 2 256-color, 3 truecolor."),
    ] = None,
    verbose: Annotated[
        bool,
        Parameter(name=["--verbose", "-v"], help="Log more detail to stderr (repeatable)."),
    ] = False,
) -> None:
    """Relico root command with global options."""

    _ = (json_mode, no_color, force_color, level, verbose)
    app.help_print()


config_app = App(name="config", help="Configuration commands", help_formatter="plain")
app.command(config_app, name="config")


_REGISTERED_CLI_COMMANDS: set[str] = set()
_REGISTERED_CLI_DESCRIPTIONS: dict[str, str] = {}


def _register_commands() -> None:
    modules = (
        register_paint_commands(app, emit),
        register_info_commands(app, emit),
        register_config_commands(config_app, emit),
    )
    for commands, descriptions in modules:
        _REGISTERED_CLI_COMMANDS.update(commands)
        _REGISTERED_CLI_DESCRIPTIONS.update(descriptions)


def get_registered_cli_commands() -> set[str]:
    """Expose CLI command names for parity tests."""

    return set(_REGISTERED_CLI_COMMANDS)


def get_registered_cli_descriptions() -> dict[str, str]:
    return dict(_REGISTERED_CLI_DESCRIPTIONS)


def _operation_error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def _apply_color_options(options: GlobalOptions) -> None:
    overrides: dict[str, object] = {}
    if options.color_level is not None:
        overrides["color_level"] = options.color_level
    init_user_config(Path.cwd(), overrides)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `relico` and `python -m relico`."""

    from relico.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so structlog output goes to stderr, not stdout.
    configure_logging(
        json_mode=options.output.format == "json",
        verbosity=options.verbosity,
    )

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            _apply_color_options(options)
            app(cleaned_args)
        except (KeyError, ValueError, OSError) as exc:
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)


_register_commands()
