"""Process-wide memoization tables with a single invalidation entry point.

Every derived cache (resolved names, parsed colors, interned formatters,
rendered escape sequences) registers here. Level changes, theme changes and
custom-color reconfiguration all call `invalidate_all()`.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, Generic, TypeVar

from relico.lib.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

logger = get_logger(__name__)

K = TypeVar("K", bound="Hashable")
V = TypeVar("V")

# Held by every writer of shared state (level, active palette, tables).
STATE_LOCK = RLock()

_generation = 0


class MemoTable(Generic[K, V]):
    """Lazily populated mapping that is only ever cleared wholesale."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._data: dict[K, V] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        try:
            return self._data[key]
        except KeyError:
            pass
        generation = _generation
        value = factory()
        # Drop values computed across an invalidation; they may be stale.
        if generation == _generation:
            self._data[key] = value
        return value

    def clear(self) -> None:
        self._data.clear()


_TABLES: dict[str, MemoTable[object, object]] = {}


def memo_table(name: str) -> MemoTable[K, V]:
    """Create and register a named table."""

    if name in _TABLES:
        raise ValueError(f"Duplicate memo table '{name}'")
    table: MemoTable[K, V] = MemoTable(name)
    _TABLES[name] = table  # type: ignore[assignment]
    return table


def table_sizes() -> dict[str, int]:
    return {name: len(table) for name, table in sorted(_TABLES.items())}


def invalidate_all(reason: str) -> None:
    """Clear every registered table atomically with respect to writers."""

    global _generation
    with STATE_LOCK:
        _generation += 1
        for table in _TABLES.values():
            table.clear()
    logger.debug("memo tables invalidated", reason=reason, generation=_generation)
