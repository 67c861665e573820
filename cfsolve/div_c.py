"""Solvers for the C-level problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def adjust_presentation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Whether the slide show ``b`` can be presented by the line-up ``a``.

    Members must first appear in ``b`` in the order they stand in ``a``.
    """
    if not b:
        raise ValueError("the presentation needs at least one slide")
    order = list(dict.fromkeys(b))
    if len(order) > len(a):
        return False
    return order == list(a[: len(order)])


def sum_closure(values: Iterable[int]) -> bool:
    """Whether the sum of every three distinct elements is itself an element."""
    present = set()
    seen: Counter[int] = Counter()
    kept: list[int] = []
    for value in values:
        present.add(value)
        seen[value] += 1
        if seen[value] <= 3:
            kept.append(value)
    return all(sum(triple) in present for triple in combinations(kept, 3))


def true_battle(s: str) -> bool:
    """Whether Alice can make the boolean expression over ``s`` evaluate to true."""
    if not s:
        raise ValueError("the string must not be empty")
    return s[0] == "1" or s[-1] == "1" or "11" in s


def andrew_stones(piles: Sequence[int]) -> int | None:
    """Minimum operations to move all inner stones to the end piles, or None if impossible."""
    inner = piles[1:-1]
    if len(piles) == 3 and piles[1] % 2 == 1:
        return None
    if not any(pile > 1 for pile in inner):
        return None
    return sum((pile + 1) // 2 for pile in inner)


def _reversed_tail_cost(n: int, k: int) -> int:
    perm = [*range(1, n - k + 1), *range(n, n - k, -1)]
    products = [position * value for position, value in enumerate(perm, start=1)]
    return sum(products) - max(products)


def another_permutation(n: int) -> int:
    """Largest sum of i * p_i minus its largest term, over permutations with a reversed tail."""
    return max([0, *(_reversed_tail_cost(n, k) for k in range(1, n + 1))])


def assemble_remainders(remainders: Sequence[int]) -> list[int]:
    """Array ``a`` with ``a[i] % a[i - 1] == remainders[i - 1]`` for every ``i``."""
    if not remainders:
        raise ValueError("at least one remainder is required")
    start = 2 * max(remainders)
    return list(accumulate(remainders, initial=start))


def basil_garden(heights: Sequence[int]) -> int:
    """Seconds until every flower's height drops to zero."""
    if not heights:
        raise ValueError("the garden must have at least one flower")
    seconds = heights[-1]
    for height in reversed(heights[:-1]):
        seconds = max(seconds + 1, height)
    return seconds


def board_moves(n: int) -> int:
    """Minimum moves to gather all figures of an n x n board (n odd) into one cell."""
    return 8 * sum(i * i for i in range(1, n // 2 + 1))


def hard_problem(m: int, a: int, b: int, c: int) -> int:
    """Most monkeys seated in two rows of ``m`` seats.

    ``a`` want row one, ``b`` want row two and ``c`` take either.
    """
    seated = min(a, m) + min(b, m)
    free_first = m - min(m, a)
    free_second = m - min(b, m)
    if c <= free_first:
        return seated + c
    return seated + free_first + min(free_second, c - free_first)


def kevin_binary_strings(s: str) -> tuple[int, int, int, int]:
    """Two substrings (1-based inclusive bounds) whose XOR is as large as possible."""
    n = len(s)
    zeros = s.count("0")
    if zeros == 0:
        return (1, 1, 1, n)
    if zeros == n - 1:
        return (1, n, 1, n - 1)
    leading_ones = len(s) - len(s.lstrip("1"))
    rest = s[leading_ones:]
    following_zeros = len(rest) - len(rest.lstrip("0"))
    if following_zeros > leading_ones:
        return (1, n, 1, n - leading_ones)
    return (1, n, leading_ones - following_zeros + 1, n - following_zeros)


class RegistrationSystem:
    """Hands out user names, numbering repeated requests."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def register(self, name: str) -> str:
        """Return "OK" for a new name, otherwise the name with the next free number."""
        count = self._counts.get(name)
        if count is None:
            self._counts[name] = 1
            return "OK"
        self._counts[name] = count + 1
        return f"{name}{count}"


def sending_messages(f: int, a: int, b: int, moments: Iterable[int]) -> bool:
    """Whether charge ``f`` lasts through sending a message at every moment.

    Staying on costs ``a`` per unit of time; switching off and on costs ``b``.
    """
    previous = 0
    for moment in moments:
        f -= min((moment - previous) * a, b)
        previous = moment
    return f > 0


def chef_stocks(prices: Iterable[int]) -> int:
    """Sum of all prices except the smallest one."""
    return sum(sorted(prices)[1:])