"""Bit manipulation helpers, set-bit counting and Euclid's GCD."""

from __future__ import annotations


def get_bit(n: int, x: int) -> int:
    """Return the bit of ``n`` at position ``x`` (0 or 1)."""
    return (n >> x) & 1


def set_bit(n: int, x: int) -> int:
    """Return ``n`` with the bit at position ``x`` set."""
    return n | (1 << x)


def clear_bit(n: int, x: int) -> int:
    """Return ``n`` with the bit at position ``x`` cleared."""
    return n & ~(1 << x)


def update_bit(n: int, x: int, v: int) -> int:
    """Return ``n`` with the bit at position ``x`` replaced by ``v``."""
    if v not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {v}")
    return (n & ~(1 << x)) | (v << x)


def clear_last_bits(n: int, x: int) -> int:
    """Return ``n`` with its lowest ``x`` bits cleared."""
    return n & (-1 << x)


def clear_bits_range(n: int, i: int, j: int) -> int:
    """Return ``n`` with the bits from position ``i`` to ``j`` inclusive cleared."""
    mask = (-1 << (j + 1)) | ((1 << i) - 1)
    return n & mask


def _check_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def count_set_bits(n: int) -> int:
    """Count the one bits of ``n`` by shifting through every bit."""
    _check_unsigned(n)
    count = 0
    while n > 0:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count the one bits of ``n`` by repeatedly dropping the lowest set bit."""
    _check_unsigned(n)
    count = 0
    while n > 0:
        n &= n - 1
        count += 1
    return count


def gcd(m: int, n: int) -> int:
    """Return the greatest common divisor of ``m`` and ``n`` by Euclid's method."""
    if n == 0:
        raise ValueError("the second number must be non-zero")
    while m % n != 0:
        m, n = n, m % n
    return n