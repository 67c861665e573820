"""Solvers for the E, F and G-level problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, product

_UNREACHABLE = -(10**15)
_INT_MIN = -(2**31)
_AQUARIUM_CEILING = 2 * (10**9 + 1)


def _pairs(count: int) -> int:
    return count * (count - 1) // 2


def two_letter_strings(words: Sequence[str]) -> int:
    """Pairs of words that differ in exactly one of their first two letters."""
    if any(len(word) < 2 for word in words):
        raise ValueError("every word needs at least two letters")
    first = Counter(word[0] for word in words)
    second = Counter(word[1] for word in words)
    same = Counter(words)
    return (
        sum(_pairs(c) for c in first.values())
        + sum(_pairs(c) for c in second.values())
        - 2 * sum(_pairs(c) for c in same.values())
    )


def block_sequence(values: Sequence[int]) -> int:
    """Fewest deletions that leave a sequence of blocks, each a length followed by that many items."""
    n = len(values)
    best = [0] * (n + 1)
    for index in range(n - 1, -1, -1):
        drop = 1 + best[index + 1]
        jump = index + values[index] + 1
        best[index] = min(drop, best[jump]) if jump <= n else drop
    return best[0]


def _water_needed(level: int, heights: Sequence[int]) -> int:
    return sum(level - h for h in heights if h < level)


def aquarium_height(x: int, heights: Sequence[int]) -> int:
    """Highest water level reachable with at most ``x`` units of water."""
    low, high = 1, _AQUARIUM_CEILING
    while low <= high:
        mid = low + (high - low) // 2
        if _water_needed(mid, heights) <= x:
            low = mid + 1
        else:
            high = mid - 1
    return high


def negatives_positives(values: Iterable[int]) -> int:
    """Largest sum reachable by repeatedly negating two adjacent elements."""
    values = list(values)
    non_positive = sum(1 for value in values if value <= 0)
    if non_positive % 2 == 0:
        return sum(abs(value) for value in values)
    ordered = sorted(values)
    total = 0
    current = ordered[0]
    for following in ordered[1:]:
        if current < 0 and -current > following:
            current, following = -current, -following
        total += current
        current = following
    return total + current


def romantic_glasses(values: Sequence[int]) -> bool:
    """Whether some prefix sum of the even positions equals one of the odd positions."""
    odd_sums = list(accumulate(values[0::2]))
    even_sums = set(accumulate(values[1::2]))
    return any(total in even_sums for total in odd_sums)


def pictures_with_kittens(k: int, x: int, beauties: Sequence[int]) -> int:
    """Largest total beauty of ``x`` reposts such that every ``k`` pictures hold one; -1 if impossible."""
    if k < 1:
        raise ValueError("k must be positive")
    n = len(beauties)
    # best[r][i]: answer starting at picture i with r reposts still to place
    previous = [0 if n - index < k else _UNREACHABLE for index in range(n + 1)]
    for _ in range(x):
        current = [_UNREACHABLE] * (n + 1)
        for index in range(n):
            window = range(index, min(index + k, n))
            current[index] = max(
                [_UNREACHABLE, *(beauties[i] + previous[i + 1] for i in window)]
            )
        previous = current
    answer = previous[0]
    if answer == _INT_MIN or n // k > x:
        return -1
    return answer


def _last_digit(value: int) -> int:
    digit = abs(value) % 10
    return -digit if value < 0 else digit


def three_sum(values: Iterable[int]) -> bool:
    """Whether three distinct elements have a sum ending in the digit 3."""
    digits = Counter(_last_digit(value) for value in values)
    for i, j, k in product(range(10), repeat=3):
        if (i + j + k) % 10 != 3:
            continue
        left = Counter(digits)
        if left[i] <= 0:
            continue
        left[i] -= 1
        if left[j] <= 0:
            continue
        left[j] -= 1
        if left[k] > 0:
            return True
    return False


def forever_winter(n: int, edges: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Arm count and leaves per arm of a snowflake graph on vertices 1..n."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    leaf = next((nbrs for nbrs in adjacency if len(nbrs) == 1), None)
    if leaf is None:
        raise ValueError("the graph has no leaf")
    arm = leaf[0]
    y = len(adjacency[arm])
    x = max([0, *(len(adjacency[v]) for v in adjacency[arm])])
    return x, y - 1


def teleporters(c: int, costs: Sequence[int]) -> int:
    """Most teleporters usable with ``c`` coins, walking back to the start after each."""
    used = 0
    for price in sorted(cost + position for position, cost in enumerate(costs, start=1)):
        if price <= c:
            used += 1
            c -= price
    return used