"""Elementary number theory."""

from __future__ import annotations

__all__ = ["gcd", "lcm", "trailing_zeroes_in_factorial"]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (Euclid's algorithm)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``; zero if either is zero."""
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return abs(a * b) // divisor


def trailing_zeroes_in_factorial(n: int) -> int:
    """Return the number of trailing zeroes in ``n!``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count