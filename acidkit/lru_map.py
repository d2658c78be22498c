"""Fixed-capacity mapping that evicts the least recently used key."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any


class LRUMap:
    """Key-value store holding at most ``capacity`` entries."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._data: OrderedDict[Hashable, Any] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def set(self, key: Hashable, value: Any) -> None:
        """Insert or update ``key``, making it the most recently used."""
        if key in self._data:
            self._data.move_to_end(key)
        elif len(self._data) >= self._capacity:
            self._data.popitem(last=False)
        self._data[key] = value

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key`` (marking it recently used), or None."""
        if key not in self._data:
            return None
        self._data.move_to_end(key)
        return self._data[key]

    def remove(self, key: Hashable) -> None:
        """Remove ``key`` if present."""
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)