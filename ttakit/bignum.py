"""Non-negative arbitrary-precision integers and simple real/complex wrappers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

LIMB_BITS = 32
LIMB_MASK = (1 << LIMB_BITS) - 1
U64_MAX = (1 << 64) - 1


def _check_non_negative(value: int) -> int:
    if not isinstance(value, int):
        raise TypeError("value must be an int")
    if value < 0:
        raise ValueError("BigInt holds non-negative values only")
    return value


class BigInt:
    """Non-negative integer exposed as little-endian 32-bit limbs."""

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, "BigInt"] = 0) -> None:
        self._value = int(value) if isinstance(value, BigInt) else _check_non_negative(value)

    def set_u64(self, value: int) -> None:
        """Assign an unsigned 64-bit value."""
        _check_non_negative(value)
        if value > U64_MAX:
            raise ValueError("value does not fit in 64 bits")
        self._value = value

    def __add__(self, other: object) -> "BigInt":
        if isinstance(other, BigInt):
            return BigInt(self._value + other._value)
        if isinstance(other, int):
            return BigInt(self._value + _check_non_negative(other))
        return NotImplemented

    __radd__ = __add__

    def mersenne_mod(self, p: int) -> None:
        """Drop every bit at position ``p`` and above, in place.

        The high part is discarded, not folded back, so the result is the
        value modulo 2**p.
        """
        if p < 0:
            raise ValueError("p must be non-negative")
        self._value &= (1 << p) - 1

    def limbs(self) -> list[int]:
        """Little-endian 32-bit limbs without high zero limbs (empty for zero)."""
        value = self._value
        out = []
        while value:
            out.append(value & LIMB_MASK)
            value >>= LIMB_BITS
        return out

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BigInt({self._value})"


def _as_bigint(value: Union[int, BigInt]) -> BigInt:
    return value if isinstance(value, BigInt) else BigInt(value)


@dataclass
class BigReal:
    """Real number ``mantissa * base**exponent`` with a BigInt mantissa."""

    mantissa: BigInt = field(default_factory=BigInt)
    exponent: int = 0

    def __post_init__(self) -> None:
        self.mantissa = _as_bigint(self.mantissa)

    def __add__(self, other: object) -> "BigReal":
        if not isinstance(other, BigReal):
            return NotImplemented
        if self.exponent != other.exponent:
            raise ValueError("cannot add reals with different exponents")
        return BigReal(self.mantissa + other.mantissa, self.exponent)


@dataclass
class BigComplex:
    """Complex number with BigReal parts."""

    real: BigReal = field(default_factory=BigReal)
    imag: BigReal = field(default_factory=BigReal)

    def __add__(self, other: object) -> "BigComplex":
        if not isinstance(other, BigComplex):
            return NotImplemented
        return BigComplex(self.real + other.real, self.imag + other.imag)


@dataclass
class BigMul:
    """Operands and product of a multiplication workflow."""

    lhs: BigInt = field(default_factory=BigInt)
    rhs: BigInt = field(default_factory=BigInt)
    product: BigInt = field(default_factory=BigInt)