"""Tracked allocations with lifetimes, access auditing and cleanup."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

FOREVER: Optional[int] = None
"""Lifetime value meaning the block never expires."""

_ABNORMAL_ACCESS_COUNT = 1_000_000


class AccessError(Exception):
    """Raised when a block is freed, expired or closed to direct access."""


@dataclass(eq=False)
class Block:
    """A tracked value with its lifecycle metadata."""

    value: Any
    size: int
    created_tick: int
    expires_tick: Optional[int]
    allow_direct_access: bool = True
    is_const: bool = False
    is_volatile: bool = False
    access_count: int = 0
    pin_count: int = 0
    freed: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


def _expired(block: Block, now: int) -> bool:
    return block.expires_tick is not None and now > block.expires_tick


def _size_of(value: Any) -> int:
    return sys.getsizeof(value)


class MemoryRegistry:
    """Registry of live blocks, with lifetime checks and dirty-block cleanup."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._blocks: dict[int, Block] = {}
        self._usage = 0

    def _make_block(
        self,
        value: Any,
        lifetime: Optional[int],
        now: int,
        allow_direct: bool,
        is_const: bool,
        is_volatile: bool,
    ) -> Block:
        return Block(
            value=value,
            size=_size_of(value),
            created_tick=now,
            expires_tick=None if lifetime is FOREVER else now + lifetime,
            allow_direct_access=allow_direct,
            is_const=is_const,
            is_volatile=is_volatile,
        )

    def _register(
        self,
        value: Any,
        lifetime: Optional[int],
        now: int,
        allow_direct: bool,
        is_const: bool = False,
        is_volatile: bool = False,
    ) -> Block:
        if lifetime is not None and lifetime < 0:
            raise ValueError("lifetime must be non-negative or FOREVER")
        try:
            block = self._make_block(value, lifetime, now, allow_direct, is_const, is_volatile)
        except MemoryError:
            self.autoclean(now)
            block = self._make_block(value, lifetime, now, allow_direct, is_const, is_volatile)
        with self._lock:
            self._blocks[id(block)] = block
            self._usage += block.size
        return block

    def alloc(
        self,
        value: Any,
        lifetime: Optional[int] = FOREVER,
        now: int = 0,
        *,
        allow_direct: bool = True,
    ) -> Block:
        """Track ``value`` for ``lifetime`` ticks from ``now`` (``FOREVER`` by default)."""
        return self._register(value, lifetime, now, allow_direct)

    def realloc(
        self,
        block: Optional[Block],
        value: Any,
        lifetime: Optional[int] = FOREVER,
        now: int = 0,
    ) -> Block:
        """Replace ``block`` with a new one holding ``value``, keeping its flags."""
        if block is None:
            return self._register(value, lifetime, now, True)
        with block._lock:
            if block.freed:
                raise AccessError("cannot reallocate a freed block")
            is_const = block.is_const
            is_volatile = block.is_volatile
            allow_direct = block.allow_direct_access
        new_block = self._register(value, lifetime, now, allow_direct, is_const, is_volatile)
        self.free(block)
        return new_block

    def access(self, block: Block, now: int) -> Any:
        """Return the block's value after checking its lifecycle; pins the block."""
        if block is None:
            raise AccessError("no block")
        with block._lock:
            if block.freed:
                raise AccessError("block has been freed")
            if _expired(block, now):
                raise AccessError("block has expired")
            if not block.allow_direct_access:
                raise AccessError("direct access is not allowed")
            block.access_count += 1
            block.pin_count += 1
            return block.value

    def free(self, block: Optional[Block]) -> None:
        """Release ``block``; freeing twice is harmless."""
        if block is None:
            return
        with self._lock:
            self._blocks.pop(id(block), None)
        with block._lock:
            if block.freed:
                return
            block.freed = True
        with self._lock:
            self._usage -= block.size

    def inspect_dirty(self, now: int) -> list[Block]:
        """Blocks that have expired or have an abnormal access count."""
        with self._lock:
            return [
                block
                for block in self._blocks.values()
                if _expired(block, now) or block.access_count > _ABNORMAL_ACCESS_COUNT
            ]

    def autoclean(self, now: int) -> int:
        """Free every dirty block; return how many were freed."""
        dirty = self.inspect_dirty(now)
        for block in dirty:
            self.free(block)
        return len(dirty)

    def autoclean_and_inspect(self, now: int) -> list[Block]:
        """Clean dirty blocks, then report any that remain dirty."""
        self.autoclean(now)
        return self.inspect_dirty(now)

    @property
    def usage(self) -> int:
        """Total size in bytes of the live blocks."""
        with self._lock:
            return self._usage

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)


def save_current_progress(filename: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``filename`` atomically via a synced temporary file."""
    target = os.fspath(filename)
    temp_name = f"{target}.tmp"
    try:
        with open(temp_name, "wb") as handle:
            handle.write(bytes(data))
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, target)
    except OSError:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise

    parent = os.path.dirname(os.path.abspath(target))
    flags = os.O_RDONLY | getattr(os, "O_DIRECTORY", 0)
    try:
        dir_fd = os.open(parent, flags)
    except OSError:
        return
    try:
        os.fsync(dir_fd)
    except OSError:
        pass
    finally:
        os.close(dir_fd)