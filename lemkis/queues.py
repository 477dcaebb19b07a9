"""Thread-safe first-in first-out queues."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class ConcurrentQueue:
    """A FIFO queue whose pop blocks until an element is available."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._not_empty = threading.Condition()

    def push(self, value: Any) -> None:
        """Append a value and wake one waiting consumer."""
        with self._not_empty:
            self._items.append(value)
            self._not_empty.notify()

    def try_pop(self) -> bool:
        """Remove the front element if there is one; report whether it was."""
        with self._not_empty:
            if not self._items:
                return False
            self._items.popleft()
            return True

    def pop(self) -> Any:
        """Wait until the queue is non-empty, then remove and return the front."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: self._items)
            return self._items.popleft()

    def try_peek(self) -> Any:
        """Return the front element without removing it, or None when empty."""
        with self._not_empty:
            return self._items[0] if self._items else None

    def empty(self) -> bool:
        with self._not_empty:
            return not self._items

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)


class LockedQueue:
    """A FIFO queue guarded by one lock; pop never waits."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()

    def push(self, item: Any) -> None:
        with self._lock:
            self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the front element; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from an empty queue")
            return self._items.popleft()

    def empty(self) -> bool:
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)