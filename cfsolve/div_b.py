"""Solvers for the B-level problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def arranging_cats(s: str, f: str) -> int:
    """Minimum operations to turn cat layout ``s`` into ``f``.

    A cat may be added, removed or moved between boxes; a move fixes one
    surplus and one missing cat at once.
    """
    if len(s) != len(f):
        raise ValueError("layouts must have the same length")
    missing = sum(1 for have, want in zip(s, f) if have == "0" and want == "1")
    surplus = sum(1 for have, want in zip(s, f) if have == "1" and want == "0")
    return min(missing, surplus) + abs(missing - surplus)


def average_sleep_time(k: int, hours: Sequence[int]) -> float:
    """Average total over every window of ``k`` consecutive days."""
    n = len(hours)
    if not 1 <= k <= n:
        raise ValueError("window length must be between 1 and the number of days")
    prefix = [0, *accumulate(hours)]
    total = sum(prefix[end] - prefix[end - k] for end in range(k, n + 1))
    return total / (n - k + 1)


def bad_boy(n: int, m: int, i: int, j: int) -> tuple[int, int, int, int]:
    """Two cells whose tour from (i, j) is longest: opposite corners of the grid."""
    return (1, 1, n, m)


def hamster_farm(n: int, boxes: Sequence[int]) -> tuple[int, int]:
    """Pick the box kind leaving the fewest hamsters unboxed.

    Returns the 1-based kind (smallest index on ties) and how many boxes to buy.
    """
    if not boxes:
        raise ValueError("at least one kind of box is required")
    if any(size <= 0 for size in boxes):
        raise ValueError("box sizes must be positive")
    _, kind = min((n % size, index) for index, size in enumerate(boxes))
    return kind + 1, n // boxes[kind]


def kevin_permutation(n: int, k: int) -> list[int]:
    """Permutation of 1..n minimising the sum of window minima of length ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    result: list[int | None] = [None] * n
    next_value = 1
    for position in range(k - 1, n, k):
        result[position] = next_value
        next_value += 1
    filled: list[int] = []
    for value in result:
        if value is None:
            value = next_value
            next_value += 1
        filled.append(value)
    return filled


_MIRROR = str.maketrans("pq", "qp")


def normal_problem(s: str) -> str:
    """What the glass shows from inside: 'p' and 'q' swapped, order reversed."""
    return s.translate(_MIRROR)[::-1]


def preparing_contest(n: int, k: int) -> list[int]:
    """Order of 1..n with exactly ``k`` rises: 1..k ascending, then n down to k+1."""
    return [*range(1, k + 1), *range(n, k, -1)]