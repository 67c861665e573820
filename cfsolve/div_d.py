"""Solvers for the D-level problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import lru_cache
from math import isqrt

_BIT_WIDTH = 31
_VOWELS = frozenset("ae")
_CONSONANTS = frozenset("bcd")


def manhattan_circle(grid: Sequence[str]) -> tuple[int, int]:
    """Centre (1-based row, column) of the Manhattan circle drawn with '#' in ``grid``."""
    cells = [
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == "#"
    ]
    if not cells:
        raise ValueError("the grid holds no circle")
    first, last = cells[0], cells[-1]
    if first == last:
        return first[0] + 1, first[1] + 1
    return (first[0] + last[0]) // 2 + 1, (first[1] + last[1]) // 2 + 1


def mathematical_problem(s: str) -> int:
    """Smallest value reachable by placing ``len(s) - 2`` '+' or '*' signs between the digits."""
    if len(s) < 2:
        raise ValueError("at least two digits are required")
    digits = [int(ch) for ch in s]
    best: int | None = None
    for start in range(len(digits) - 1):
        value = digits[start] * 10 + digits[start + 1]
        for index, digit in enumerate(digits):
            if index in (start, start + 1) or digit == 1:
                continue
            value = min(value + digit, value * digit)
        best = value if best is None else min(best, value)
    assert best is not None
    return best


def permutation_game(
    k: int, pb: int, ps: int, perm: Sequence[int], scores: Sequence[int]
) -> str:
    """Winner of the ``k``-turn game: "Bodya", "Sasha" or "Draw".

    Each player adds the score of the current position and moves along the
    permutation only when that raises the score.
    """

    def play(position: int) -> int:
        total = 0
        for _ in range(k):
            total += scores[position - 1]
            following = perm[position - 1]
            if scores[following - 1] > scores[position - 1]:
                position = following
        return total

    bodya, sasha = play(pb), play(ps)
    if bodya > sasha:
        return "Bodya"
    if bodya == sasha:
        return "Draw"
    return "Sasha"


def is_binary_decimal(k: int) -> bool:
    """Whether every decimal digit of ``k`` is 0 or 1."""
    while k > 0:
        if k % 10 > 1:
            return False
        k //= 10
    return True


@lru_cache(maxsize=None)
def _is_product(n: int) -> bool:
    if n == 1 or is_binary_decimal(n):
        return True
    root = isqrt(n)
    if root * root == n and is_binary_decimal(root):
        return True
    return any(
        n % factor == 0 and _is_product(factor) and _is_product(n // factor)
        for factor in range(2, root + 1)
    )


def is_product_of_binary_decimals(n: int) -> bool:
    """Whether ``n`` is a product of numbers written only with digits 0 and 1."""
    if n <= 0:
        return is_binary_decimal(n)
    return _is_product(n)


def unnatural_language(s: str) -> str:
    """Split a word over the letters a, e (vowels) and b, c, d into dotted syllables."""
    if not s:
        raise ValueError("the word must not be empty")
    last_break = len(s) - 2
    chars: list[str] = []
    for index, ch in enumerate(s):
        chars.append(ch)
        if ch in _VOWELS and index < last_break:
            chars.append(".")
    for index in range(len(chars) - 1):
        if chars[index] in _CONSONANTS and chars[index + 1] in _CONSONANTS:
            if index == 0:
                raise ValueError("a word cannot start with two consonants")
            chars[index], chars[index - 1] = chars[index - 1], chars[index]
    return "".join(chars)


def very_different_array(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest total difference from picking ``len(a)`` of ``b`` and pairing them with ``a``."""
    if len(b) < len(a):
        raise ValueError("b must have at least as many elements as a")
    desc = sorted(a, reverse=True)
    asc = sorted(b)
    i, j = 0, len(desc) - 1
    k, l = 0, len(asc) - 1
    total = 0
    while i <= j:
        left = abs(desc[i] - asc[k])
        right = abs(desc[j] - asc[l])
        if left > right:
            total += left
            i += 1
            k += 1
        elif left < right:
            total += right
            j -= 1
            l -= 1
        else:
            total += right
            if desc[i] > asc[i]:
                j -= 1
                l -= 1
            else:
                i += 1
                k += 1
    return total


def vlad_division(values: Sequence[int]) -> int:
    """Number of groups needed so that no two numbers in a group share a set bit among 31."""
    n = len(values)
    counts = [sum(1 for value in values if value >> bit & 1) for bit in range(_BIT_WIDTH)]
    if min(counts) == 0 or max(counts) == 0:
        return n
    return max(max(count, n - count) for count in counts)


def yarik_notes(values: Sequence[int]) -> int:
    """Pairs i < j with b_i ** b_j == b_j ** b_i for notes b = 2 ** a."""
    counts = Counter(values)
    equal_pairs = sum(f * (f - 1) // 2 for f in counts.values())
    return equal_pairs + counts[1] * counts[2]