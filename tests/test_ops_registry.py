"""Registry bootstrap and CLI surface parity."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from relico.cli.main import get_registered_cli_commands, get_registered_cli_descriptions
from relico.lib.ops.registry import OperationSpec, get_all_operations, get_operation, operation


@dataclass(frozen=True, slots=True)
class _DupInput:
    pass


@dataclass(frozen=True, slots=True)
class _DupOutput:
    ok: bool


def _dup_sync(_: _DupInput) -> _DupOutput:
    return _DupOutput(ok=True)


def test_get_all_operations_bootstraps_registry() -> None:
    names = [op.name for op in get_all_operations()]

    assert names == sorted(names)
    assert set(names) == {
        "config.show",
        "info.contrast",
        "info.palette",
        "info.support",
        "paint.gradient",
        "paint.rainbow",
        "paint.text",
    }


def test_every_operation_has_a_cli_command() -> None:
    cli_commands = get_registered_cli_commands()

    for op in get_all_operations():
        assert op.cli_name in cli_commands, f"{op.name} missing CLI command"


def test_cli_help_matches_operation_description() -> None:
    descriptions = get_registered_cli_descriptions()

    for op in get_all_operations():
        assert descriptions[op.name] == op.description


def test_get_operation_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_operation("paint.sparkle")


def test_duplicate_operation_name_guard() -> None:
    with pytest.raises(ValueError, match="Duplicate operation name"):
        operation(
            OperationSpec(
                name="paint.text",
                handler=_dup_sync,
                input_type=_DupInput,
                output_type=_DupOutput,
                cli_group="paint",
                cli_name="paint-dup",
                description="dup",
            )
        )
