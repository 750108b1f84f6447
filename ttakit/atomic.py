"""Atomic 64-bit counters and a mutex-guarded function wrapper with expiry."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from .hashmap import IntMap

MASK64 = (1 << 64) - 1

FUNC_ATOMIC = 1
FUNC_ASYNC = 2
FUNC_THREADED = 3

EXPIRY_TICKS = 60000
"""Ticks after its timestamp at which a wrapper counts as expired."""

_TABLE_CAPACITY = 16


def _check_u64(value: int) -> int:
    if not isinstance(value, int):
        raise TypeError("value must be an int")
    if value < 0 or value > MASK64:
        raise ValueError("value must fit in an unsigned 64-bit word")
    return value


class AtomicU64:
    """Unsigned 64-bit integer with sequentially consistent operations."""

    __slots__ = ("_lock", "_value")

    def __init__(self, value: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = _check_u64(value)

    def load(self) -> int:
        """Current value."""
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        """Replace the value."""
        value = _check_u64(value)
        with self._lock:
            self._value = value

    def increment(self) -> int:
        """Add one, wrapping at 2**64, and return the new value."""
        with self._lock:
            self._value = (self._value + 1) & MASK64
            return self._value

    def __repr__(self) -> str:
        return f"AtomicU64({self.load()})"


class FuncWrapper:
    """Runs a function under a mutex until the wrapper expires.

    The wrapper expires once the tick passed to it is more than
    ``EXPIRY_TICKS`` after the tick it was created with.
    """

    def __init__(self, fun: Optional[Callable[[], Any]] = None, now: int = 0) -> None:
        self.type = FUNC_ATOMIC
        self._lock = threading.Lock()
        self.ts = now
        self.expired = False
        self.args: Any = None
        self.tbl = IntMap(_TABLE_CAPACITY)
        self.fun = fun
        self.ret: Any = None

    def has_expired(self, now: int) -> bool:
        """Whether ``now`` lies past the expiry window; marks the wrapper expired."""
        if now > self.ts + EXPIRY_TICKS:
            self.expired = True
            return True
        return False

    def execute(self, now: int) -> Any:
        """Call the function under the mutex and return the stored result.

        The function's return value becomes the stored result. An expired
        wrapper runs nothing and returns ``None``.
        """
        with self._lock:
            if self.has_expired(now):
                return None
            if self.fun is not None:
                self.ret = self.fun()
            return self.ret