"""Small number and bit utilities shared by the solvers."""

from __future__ import annotations

import math

_WORD_MASK = (1 << 64) - 1


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, using 6k +/- 1 trial division."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` has at most one bit set (zero counts)."""
    return (n & (n - 1)) == 0


def is_perfect_square(x: int) -> bool:
    """Return True if ``x`` is a non-negative perfect square."""
    if x < 0:
        return False
    root = math.isqrt(x)
    return root * root == x


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return a // gcd(a, b) * b


def num_digits(n: int) -> int:
    """Number of decimal digits of a positive integer."""
    if n <= 0:
        raise ValueError("num_digits needs a positive integer")
    return len(str(n))


def set_bits(x: int) -> int:
    """Count the set bits of ``x`` viewed as a 64-bit word."""
    return bin(x & _WORD_MASK).count("1")


def dec_to_binary(n: int) -> str:
    """Binary digits of ``n``; empty for zero and negative numbers."""
    if n <= 0:
        return ""
    return format(n, "b")


def binary_to_decimal(s: str) -> int:
    """Value of a binary digit string; any character other than '1' counts as 0."""
    return sum(1 << power for power, ch in enumerate(reversed(s)) if ch == "1")