"""Chained hash table keyed by SipHash over byte representations of keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from .siphash import DEFAULT_K0, DEFAULT_K1, siphash24

HashFunc = Callable[[Any, int, int], int]
FreeFunc = Callable[[Any], None]

_DEFAULT_CAPACITY = 16


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    raise TypeError(f"default hash needs bytes or str keys, got {type(key).__name__}")


def _default_hash(key: Any, k0: int, k1: int) -> int:
    return siphash24(_key_bytes(key), k0, k1)


@dataclass(slots=True)
class _Entry:
    key: Any
    value: Any


class HashTable:
    """Fixed-bucket-count hash table with separate chaining.

    ``hash_func(key, k0, k1)`` picks the bucket; keys are compared with ``==``.
    ``key_free`` and ``val_free`` are called on keys and values that leave
    the table (``None`` entries are skipped).
    """

    def __init__(
        self,
        capacity: int = _DEFAULT_CAPACITY,
        hash_func: Optional[HashFunc] = None,
        key_free: Optional[FreeFunc] = None,
        val_free: Optional[FreeFunc] = None,
    ) -> None:
        self.capacity = capacity if capacity and capacity > 0 else _DEFAULT_CAPACITY
        self.k0 = DEFAULT_K0
        self.k1 = DEFAULT_K1
        self._hash = hash_func or _default_hash
        self._key_free = key_free
        self._val_free = val_free
        self._buckets: list[list[_Entry]] = [[] for _ in range(self.capacity)]
        self._size = 0

    def _bucket(self, key: Any) -> list[_Entry]:
        return self._buckets[self._hash(key, self.k0, self.k1) % self.capacity]

    def _release(self, entry: _Entry, *, key: bool) -> None:
        if key and self._key_free and entry.key is not None:
            self._key_free(entry.key)
        if self._val_free and entry.value is not None:
            self._val_free(entry.value)

    def put(self, key: Hashable, value: Any) -> None:
        """Insert ``key`` or replace its value, releasing the old value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                self._release(entry, key=False)
                entry.value = value
                return
        bucket.insert(0, _Entry(key, value))
        self._size += 1

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Value stored for ``key``, or ``default``."""
        for entry in self._bucket(key):
            if entry.key == key:
                return entry.value
        return default

    def remove(self, key: Hashable) -> bool:
        """Remove ``key``, releasing key and value; return whether it existed."""
        bucket = self._bucket(key)
        for pos, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[pos]
                self._release(entry, key=True)
                self._size -= 1
                return True
        return False

    def clear(self) -> None:
        """Remove every entry, releasing keys and values."""
        for bucket in self._buckets:
            for entry in bucket:
                self._release(entry, key=True)
            bucket.clear()
        self._size = 0

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self._bucket(key))

    def __len__(self) -> int:
        return self._size