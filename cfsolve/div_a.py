"""Solvers for the introductory (A-level) problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_VOWELS = frozenset("aeiouy")


def cheap_travel(n: int, m: int, a: int, b: int) -> int:
    """Minimum cost of ``n`` rides with single tickets at ``a`` or ``m``-ride tickets at ``b``."""
    full, rest = divmod(n, m)
    singles_only = n * a
    mixed = full * b + rest * a
    passes_only = full * b + b
    return min(singles_only, mixed, passes_only)


def easy_problem(n: int) -> int:
    """Count ordered pairs (i, j) with 1 <= i, j <= 100 and i + j == n."""
    return sum(1 for i in range(1, 101) if 1 <= n - i <= 100)


def football_winner(teams: Iterable[str]) -> str:
    """Name that occurs most often; ties go to the lexicographically smallest."""
    counts = Counter(teams)
    if not counts:
        raise ValueError("no goals were scored")
    return min(counts, key=lambda name: (-counts[name], name))


def combination_lock(x: int) -> bool:
    """Whether the lock can be opened, i.e. ``x`` is divisible by 33."""
    return x % 33 == 0


def line_trip(x: int, stations: Sequence[int]) -> int:
    """Smallest tank needed to go from 0 to ``x`` and back, refuelling at stations."""
    if not stations:
        raise ValueError("at least one station is required")
    ordered = sorted(stations)
    longest = ordered[0]
    longest = max([longest, *(b - a for a, b in zip(ordered, ordered[1:]))])
    return max(longest, 2 * (x - ordered[-1]))


def square_area(corners: Iterable[tuple[int, int]]) -> int:
    """Area of an axis-aligned square given its four corners."""
    xs = sorted({x for x, _ in corners})
    if len(xs) < 2:
        raise ValueError("corners do not describe a square")
    side = abs(xs[0] - xs[1])
    return side * side


def string_task(s: str) -> str:
    """Lower-case, drop vowels (y included) and put '.' before every consonant."""
    return "".join(f".{ch}" for ch in s.lower() if ch not in _VOWELS)


def _is_ascii_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _toggle(ch: str) -> str:
    if _is_ascii_lower(ch):
        return ch.upper()
    if "A" <= ch <= "Z":
        return ch.lower()
    return ch


def caps_lock(s: str) -> str:
    """Undo an accidental Caps Lock: flip case when every letter after the first is upper case."""
    if any(_is_ascii_lower(ch) for ch in s[1:]):
        return s
    return "".join(_toggle(ch) for ch in s)