"""Fixed-length tuple and hash set containers."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator, Optional

from .table import FreeFunc, HashFunc, HashTable


class FixedTuple:
    """Tuple of a fixed number of mutable slots, all ``None`` at first."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must be non-negative")
        self._elements: list[Any] = [None] * length

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._elements):
            raise IndexError(f"index {index} out of range for length {len(self._elements)}")

    def set(self, index: int, element: Any) -> None:
        """Store ``element`` at ``index``."""
        self._check(index)
        self._elements[index] = element

    def get(self, index: int) -> Any:
        """Element at ``index``."""
        self._check(index)
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def destroy(self, free_elem: Optional[Callable[[Any], None]] = None) -> None:
        """Release non-``None`` elements through ``free_elem`` and empty the tuple."""
        if free_elem is not None:
            for element in self._elements:
                if element is not None:
                    free_elem(element)
        self._elements = []


class HashSet:
    """Set of keys stored in a chained SipHash table."""

    def __init__(
        self,
        capacity: int = 16,
        hash_func: Optional[HashFunc] = None,
        key_free: Optional[FreeFunc] = None,
    ) -> None:
        self._table = HashTable(capacity, hash_func, key_free, None)

    def add(self, key: Hashable) -> None:
        """Add ``key``; an existing equal key is kept."""
        self._table.put(key, True)

    def __contains__(self, key: object) -> bool:
        return self._table.get(key) is not None

    def remove(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._table.remove(key)

    def clear(self) -> None:
        """Remove every key."""
        self._table.clear()

    def __len__(self) -> int:
        return len(self._table)