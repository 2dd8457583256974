"""Conversion of report values into JSON payloads."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

from relico.lib.color.convert import Rgb, rgb_to_hex


def to_jsonable(value: Any) -> Any:
    """Convert supported values to JSON-serializable payloads."""

    if isinstance(value, Rgb):
        return rgb_to_hex(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable({item.name: getattr(value, item.name) for item in fields(value)})
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict | MappingProxyType):
        typed_dict = cast("dict[object, object]", value)
        return {str(key): to_jsonable(item) for key, item in typed_dict.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        typed_seq = cast("list[object] | tuple[object, ...] | set[object]", value)
        return [to_jsonable(item) for item in typed_seq]
    return value
