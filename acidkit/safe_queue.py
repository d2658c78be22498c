"""Thread-safe FIFO queue with blocking and non-blocking pops."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class SafeQueue:
    """FIFO queue guarded by a lock and a condition variable."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def empty(self) -> bool:
        with self._cond:
            return not self._items

    def push(self, item: Any) -> None:
        """Append ``item`` and wake one waiting consumer."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def try_pop(self) -> Any | None:
        """Remove and return the front item, or None if the queue is empty."""
        with self._cond:
            if not self._items:
                return None
            return self._items.popleft()

    def wait_and_pop(self, timeout: float | None = None) -> Any:
        """Block until an item is available and return it.

        Raises TimeoutError if ``timeout`` seconds pass with the queue empty.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: bool(self._items), timeout):
                raise TimeoutError("queue stayed empty")
            return self._items.popleft()