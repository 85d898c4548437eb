from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

from ..core.exceptions import NotFoundError, ValidationError

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Keyed store of frozen records.

    Reads hand out the stored snapshots; ``update`` swaps in a new snapshot
    built with ``dataclasses.replace`` and never mutates the old one.
    """

    def __init__(self, key: Callable[[T], Hashable], *, name: str = "records"):
        self._key = key
        self._name = name
        self._rows: Dict[Hashable, T] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[T]:
        return self._rows.get(key)

    def list(self, predicate: Optional[Callable[[T], bool]] = None) -> Tuple[T, ...]:
        rows = tuple(self._rows.values())
        if predicate is None:
            return rows
        return tuple(r for r in rows if predicate(r))

    def add(self, record: T) -> T:
        key = self._key(record)
        with self._lock:
            if key in self._rows:
                raise ValidationError(f"Duplicate key {key!r} in {self._name}")
            self._rows[key] = record
        return record

    def update(self, key: Hashable, **changes: Any) -> T:
        with self._lock:
            current = self._rows.get(key)
            if current is None:
                raise NotFoundError(f"{self._name} {key!r} not found")
            updated = replace(current, **changes)
            if self._key(updated) != key:
                raise ValidationError(f"Key of {self._name} {key!r} cannot change")
            self._rows[key] = updated
        return updated

    def __len__(self) -> int:
        return len(self._rows)
