"""CLI output formatting utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias, cast

from relico.lib.formatting import FormatContext, TextFormattable
from relico.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json"]
JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

_DEFAULT_FORMAT_CTX = FormatContext()


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


def _to_json_value(value: Any) -> JSONValue:
    return cast("JSONValue", to_jsonable(value))


def normalize_output_format(*, json_mode: bool) -> OutputFormat:
    return "json" if json_mode else "text"


def emit(value: Any, config: OutputConfig) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(json.dumps(_to_json_value(value), sort_keys=True))
        return
    # Types without format_text() fall back to indented JSON.
    if isinstance(value, TextFormattable):
        print(value.format_text(_DEFAULT_FORMAT_CTX))
    else:
        print(json.dumps(_to_json_value(value), sort_keys=True, indent=2))
