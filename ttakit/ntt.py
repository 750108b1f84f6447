"""Number-theoretic transform over NTT-friendly primes, with modular helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1


@dataclass(frozen=True)
class NttPrime:
    """A prime modulus suitable for power-of-two transforms."""

    modulus: int
    primitive_root: int
    max_power_two: int
    montgomery_inv: int
    """-modulus^-1 mod 2^64, used by Montgomery reduction."""
    montgomery_r2: int
    """R^2 mod modulus with R = 2^64, used for Montgomery conversion."""


NTT_PRIMES: tuple[NttPrime, ...] = (
    NttPrime(998244353, 3, 23, 17450252288407896063, 299560064),
    NttPrime(1004535809, 3, 21, 8214279848305098751, 742115580),
    NttPrime(469762049, 3, 26, 18226067692438159359, 118963808),
)


def mod_add(a: int, b: int, mod: int) -> int:
    """(a + b) reduced once by ``mod``, for operands already below ``mod``."""
    total = a + b
    if total >= mod:
        total -= mod
    return total & MASK64


def mod_sub(a: int, b: int, mod: int) -> int:
    """(a - b) mod ``mod``, for operands already below ``mod``."""
    return (a - b if a >= b else a + mod - b) & MASK64


def mod_mul(a: int, b: int, mod: int) -> int:
    """(a * b) mod ``mod``."""
    return (a * b) % mod


def mod_pow(base: int, exp: int, mod: int) -> int:
    """base ** exp mod ``mod``."""
    if mod == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base % mod, exp, mod)


def mod_inverse(value: int, mod: int) -> int:
    """Inverse of ``value`` modulo ``mod``, or 0 when none exists."""
    t, new_t = 0, 1
    r, new_r = mod, value % mod
    while new_r != 0:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r > 1:
        return 0
    if t < 0:
        t += mod
    return t


def montgomery_reduce(value: int, prime: NttPrime) -> int:
    """value * 2^-64 mod ``prime.modulus`` for a 128-bit ``value``."""
    value &= MASK128
    m = ((value & MASK64) * prime.montgomery_inv) & MASK64
    result = (((value + m * prime.modulus) & MASK128) >> 64) & MASK64
    if result >= prime.modulus:
        result -= prime.modulus
    return result


def montgomery_mul(lhs: int, rhs: int, prime: NttPrime) -> int:
    """Product of two values in Montgomery form, kept in Montgomery form."""
    return montgomery_reduce(lhs * rhs, prime)


def montgomery_convert(value: int, prime: NttPrime) -> int:
    """Bring ``value`` into Montgomery form for ``prime``."""
    return montgomery_reduce((value % prime.modulus) * prime.montgomery_r2, prime)


def _reverse_bits(index: int, bits: int) -> int:
    if bits == 0:
        return 0
    return int(f"{index:0{bits}b}"[::-1], 2)


def _bit_reversed(values: list[int]) -> list[int]:
    bits = len(values).bit_length() - 1
    return [values[_reverse_bits(i, bits)] for i in range(len(values))]


def ntt_transform(data: Sequence[int], prime: NttPrime, inverse: bool = False) -> list[int]:
    """Forward (or inverse, scaled by 1/n) transform of ``data`` modulo ``prime``.

    The length must be a non-zero power of two no larger than
    ``2 ** prime.max_power_two``.
    """
    n = len(data)
    if n == 0:
        raise ValueError("data must not be empty")
    if n & (n - 1):
        raise ValueError("length must be a power of two")
    if n > 1 << prime.max_power_two:
        raise ValueError("length exceeds the prime's maximum transform size")

    modulus = prime.modulus
    unity = montgomery_convert(1, prime)
    values = [montgomery_convert(int(x), prime) for x in _bit_reversed(list(data))]

    root = mod_pow(prime.primitive_root, (modulus - 1) // n, modulus)
    if inverse:
        root = mod_inverse(root, modulus)

    length = 1
    while length < n:
        step = length << 1
        wlen_mont = montgomery_convert(mod_pow(root, n // step, modulus), prime)
        for start in range(0, n, step):
            w = unity
            for j in range(start, start + length):
                u = values[j]
                v = montgomery_mul(values[j + length], w, prime)
                values[j] = mod_add(u, v, modulus)
                values[j + length] = mod_sub(u, v, modulus)
                w = montgomery_mul(w, wlen_mont, prime)
        length = step

    if inverse:
        inv_n_mont = montgomery_convert(mod_inverse(n % modulus, modulus), prime)
        values = [montgomery_mul(x, inv_n_mont, prime) for x in values]

    return [montgomery_reduce(x, prime) for x in values]


def pointwise_mul(lhs: Sequence[int], rhs: Sequence[int], prime: NttPrime) -> list[int]:
    """Element-wise product of two equal-length sequences modulo ``prime``."""
    if len(lhs) != len(rhs):
        raise ValueError("sequences must have the same length")
    return [mod_mul(a, b, prime.modulus) for a, b in zip(lhs, rhs)]


def pointwise_square(src: Sequence[int], prime: NttPrime) -> list[int]:
    """Element-wise square modulo ``prime``."""
    return [mod_mul(a, a, prime.modulus) for a in src]


def next_power_of_two(value: int) -> int:
    """Smallest power of two that is at least ``value`` (1 for 0)."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return 1
    return 1 << (value - 1).bit_length()


def crt_combine(terms: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Combine (residue, modulus) pairs by the Chinese remainder theorem.

    Returns ``(residue, modulus)`` as 128-bit values. Raises ``ValueError``
    for no terms or moduli that are not pairwise invertible.
    """
    items = list(terms)
    if not items:
        raise ValueError("at least one term is required")

    first_residue, first_modulus = items[0]
    result = first_residue % first_modulus
    modulus = first_modulus

    for residue_i, mod_i in items[1:]:
        residue_i %= mod_i
        inverse = mod_inverse(modulus % mod_i, mod_i)
        if inverse == 0:
            raise ValueError(f"modulus {mod_i} is not coprime with the combined modulus")
        delta = mod_sub(residue_i, result % mod_i, mod_i)
        k = mod_mul(delta, inverse, mod_i)
        result = (result + k * modulus) & MASK128
        modulus = (modulus * mod_i) & MASK128

    return result, modulus