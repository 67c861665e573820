"""Command-line front end that answers judge-style problems read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cfsolve.div_a import easy_problem
from cfsolve.div_b import kevin_permutation
from cfsolve.div_c import RegistrationSystem
from cfsolve.div_d import yarik_notes


class InputError(ValueError):
    """Raised when the problem input is truncated or malformed."""


class _Reader:
    """Whitespace-separated tokens of the whole input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise InputError(f"a count cannot be negative, got {value}")
        return value

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _registration(reader: _Reader) -> Iterator[str]:
    system = RegistrationSystem()
    for _ in range(reader.count()):
        yield system.register(reader.word())


def _easy_problem(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        yield str(easy_problem(reader.integer()))


def _kevin_permutation(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        n, k = reader.integer(), reader.integer()
        yield "".join(f"{value} " for value in kevin_permutation(n, k))


def _yarik_notes(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        n = reader.count()
        yield str(yarik_notes(reader.integers(n)))


_PROBLEMS: dict[str, tuple[str, Callable[[_Reader], Iterator[str]]]] = {
    "registration": ("answer registration requests one per line", _registration),
    "easy-problem": ("count pairs of numbers up to 100 with a given sum", _easy_problem),
    "kevin-permutation": ("build permutations minimising window minima", _kevin_permutation),
    "yarik-notes": ("count note pairs with equal combinations", _yarik_notes),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfsolve",
        description="Read a problem's input from standard input and print its answer.",
    )
    parser.add_argument(
        "problem",
        choices=sorted(_PROBLEMS),
        help="; ".join(f"{name}: {text}" for name, (text, _) in sorted(_PROBLEMS.items())),
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named problem over standard input; return the exit status."""
    args = _parser().parse_args(argv)
    _, solver = _PROBLEMS[args.problem]
    reader = _Reader(sys.stdin.read())
    try:
        for line in solver(reader):
            print(line)
    except ValueError as exc:
        print(f"cfsolve: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())