"""FIFO queue, LIFO stack and a priority queue for tasks."""

from __future__ import annotations

import bisect
import threading
from collections import deque
from typing import Any


class SimpleQueue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, data: Any) -> None:
        """Append ``data`` at the tail."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the head; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Drop every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class SimpleStack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Drop every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class PriorityTaskQueue:
    """Queue that pops the highest priority first, FIFO among equal priorities."""

    def __init__(self) -> None:
        self._nodes: list[tuple[int, Any]] = []

    def push(self, item: Any, priority: int = 0) -> None:
        """Insert ``item`` after every queued item of equal or higher priority."""
        bisect.insort_right(self._nodes, (priority, item), key=lambda node: -node[0])

    def pop(self) -> Any:
        """Remove and return the highest-priority item; raise IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty priority queue")
        return self._nodes.pop(0)[1]

    def pop_blocking(self, condition: threading.Condition) -> Any:
        """Wait on ``condition`` until an item is queued, then pop it.

        The caller must hold ``condition``'s lock.
        """
        condition.wait_for(lambda: bool(self._nodes))
        return self.pop()

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)