"""Open-addressing integer map with linear probing, keyed by SipHash."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterator

from .siphash import DEFAULT_K0, DEFAULT_K1, MASK64, siphash24_word

_SHRINK_MIN_CAPACITY = 1024
_SHRINK_FLOOR = 8192


class Slot(IntEnum):
    """Control byte of a map slot."""

    EMPTY = 0x00
    DELETED = 0xDE
    OCCUPIED = 0x0C


def next_pow2(n: int) -> int:
    """Smallest power of two that is at least ``n`` (1 for 0)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    return 1 << (n - 1).bit_length()


def _check_key(key: int) -> int:
    if not isinstance(key, int):
        raise TypeError("key must be an int")
    if key < 0 or key > MASK64:
        raise ValueError("key must fit in an unsigned 64-bit word")
    return key


class IntMap:
    """Map from unsigned 64-bit integers to values.

    Grows when 70% full and shrinks when very sparse and large.
    """

    def __init__(self, capacity: int = 16) -> None:
        self._reset(next_pow2(capacity))

    def _reset(self, capacity: int) -> None:
        self._cap = capacity
        self._ctrl = [Slot.EMPTY] * capacity
        self._keys: list[int] = [0] * capacity
        self._values: list[Any] = [None] * capacity
        self._size = 0

    def _start(self, key: int) -> int:
        return siphash24_word(key, DEFAULT_K0, DEFAULT_K1) & (self._cap - 1)

    def _rehash(self, new_capacity: int) -> None:
        old = list(self.items())
        self._reset(new_capacity)
        for key, value in old:
            self.insert(key, value)

    def _find(self, key: int) -> int | None:
        mask = self._cap - 1
        idx = start = self._start(key)
        while self._ctrl[idx] is not Slot.EMPTY:
            if self._ctrl[idx] is Slot.OCCUPIED and self._keys[idx] == key:
                return idx
            idx = (idx + 1) & mask
            if idx == start:
                break
        return None

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return self._cap

    def insert(self, key: int, value: Any) -> None:
        """Insert ``key`` or update its value."""
        key = _check_key(key)
        if self._size * 10 >= self._cap * 7:
            self._rehash(self._cap * 2)
        mask = self._cap - 1
        idx = start = self._start(key)
        while self._ctrl[idx] is Slot.OCCUPIED:
            if self._keys[idx] == key:
                self._values[idx] = value
                return
            idx = (idx + 1) & mask
            if idx == start:
                return
        self._keys[idx] = key
        self._values[idx] = value
        self._ctrl[idx] = Slot.OCCUPIED
        self._size += 1

    def get(self, key: int, default: Any = None) -> Any:
        """Value for ``key``, or ``default`` if absent."""
        idx = self._find(_check_key(key))
        return default if idx is None else self._values[idx]

    def delete(self, key: int) -> bool:
        """Remove ``key``; return whether it was present."""
        idx = self._find(_check_key(key))
        if idx is None:
            return False
        self._ctrl[idx] = Slot.DELETED
        self._values[idx] = None
        self._size -= 1
        if self._size > 0:
            sparse = self._cap // self._size
            if sparse > 4 and self._cap > _SHRINK_MIN_CAPACITY:
                new_capacity = self._cap // 2
                if new_capacity >= _SHRINK_FLOOR:
                    self._rehash(new_capacity)
        return True

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int) or key < 0 or key > MASK64:
            return False
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[tuple[int, Any]]:
        """Occupied (key, value) pairs in slot order."""
        for ctrl, key, value in zip(self._ctrl, self._keys, self._values):
            if ctrl is Slot.OCCUPIED:
                yield key, value