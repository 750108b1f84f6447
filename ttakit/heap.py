"""Binary heap ordered by a three-way comparator."""

from __future__ import annotations

from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class HeapTree:
    """Array-backed binary heap.

    The root is the element that compares greatest under ``cmp``: with the
    natural comparator this is a max-heap, and a reversed comparator gives a
    min-heap.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._cmp = cmp if cmp is not None else _natural
        self._data: list[Any] = []

    def _sift_up(self, index: int) -> None:
        data, cmp = self._data, self._cmp
        while index > 0:
            parent = (index - 1) // 2
            if cmp(data[index], data[parent]) > 0:
                data[index], data[parent] = data[parent], data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        data, cmp = self._data, self._cmp
        size = len(data)
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and cmp(data[left], data[largest]) > 0:
                largest = left
            if right < size and cmp(data[right], data[largest]) > 0:
                largest = right
            if largest == index:
                break
            data[index], data[largest] = data[largest], data[index]
            index = largest

    def push(self, element: Any) -> None:
        """Add ``element`` to the heap."""
        self._data.append(element)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the root element; raise IndexError when empty."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Any:
        """Root element without removing it; raise IndexError when empty."""
        if not self._data:
            raise IndexError("peek into an empty heap")
        return self._data[0]

    def clear(self) -> None:
        """Drop every element (the elements themselves are left alone)."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)