"""SipHash-2-4 over 64-bit words and byte strings."""

from __future__ import annotations

MASK64 = (1 << 64) - 1

DEFAULT_K0 = 0x0706050403020100
DEFAULT_K1 = 0x0F0E0D0C0B0A0908

_IV0 = 0x736F6D6570736575
_IV1 = 0x646F72616E646F6D
_IV2 = 0x6C7967656E657261
_IV3 = 0x7465646279746573


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & MASK64


class _State:
    """Internal SipHash state of four 64-bit lanes."""

    __slots__ = ("v0", "v1", "v2", "v3")

    def __init__(self, k0: int, k1: int) -> None:
        k0 &= MASK64
        k1 &= MASK64
        self.v0 = _IV0 ^ k0
        self.v1 = _IV1 ^ k1
        self.v2 = _IV2 ^ k0
        self.v3 = _IV3 ^ k1

    def rounds(self, count: int) -> None:
        v0, v1, v2, v3 = self.v0, self.v1, self.v2, self.v3
        for _ in range(count):
            v0 = (v0 + v1) & MASK64
            v1 = _rotl(v1, 13)
            v1 ^= v0
            v0 = _rotl(v0, 32)
            v2 = (v2 + v3) & MASK64
            v3 = _rotl(v3, 16)
            v3 ^= v2
            v0 = (v0 + v3) & MASK64
            v3 = _rotl(v3, 21)
            v3 ^= v0
            v2 = (v2 + v1) & MASK64
            v1 = _rotl(v1, 17)
            v1 ^= v2
            v2 = _rotl(v2, 32)
        self.v0, self.v1, self.v2, self.v3 = v0, v1, v2, v3

    def compress(self, m: int) -> None:
        self.v3 ^= m
        self.rounds(2)
        self.v0 ^= m

    def finalize(self) -> int:
        self.v2 ^= 0xFF
        self.rounds(4)
        return self.v0 ^ self.v1 ^ self.v2 ^ self.v3


def siphash24_word(key: int, k0: int = DEFAULT_K0, k1: int = DEFAULT_K1) -> int:
    """Hash a single 64-bit word (one compression block, no length byte)."""
    state = _State(k0, k1)
    state.compress(key & MASK64)
    return state.finalize()


def siphash24(data: bytes | bytearray | memoryview, k0: int = DEFAULT_K0, k1: int = DEFAULT_K1) -> int:
    """Standard SipHash-2-4 of a byte string with keys ``k0``/``k1``."""
    data = bytes(data)
    length = len(data)
    full = length - (length % 8)
    state = _State(k0, k1)
    for offset in range(0, full, 8):
        state.compress(int.from_bytes(data[offset:offset + 8], "little"))
    last = ((length << 56) & MASK64) | int.from_bytes(data[full:], "little")
    state.compress(last)
    return state.finalize()