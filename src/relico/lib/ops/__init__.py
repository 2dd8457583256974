"""Operation registry exports with lazy loading to avoid import cycles."""

from __future__ import annotations

from typing import Any


def get_all_operations() -> list[Any]:
    from relico.lib.ops.registry import get_all_operations as _get_all_operations

    return _get_all_operations()


def get_operation(name: str) -> Any:
    from relico.lib.ops.registry import get_operation as _get_operation

    return _get_operation(name)


__all__ = ["get_all_operations", "get_operation"]
