"""Command line front end that reads a problem's input and prints its answer."""

import argparse
import sys
from collections.abc import Callable, Iterator

from cfdrills.number_problems import min_moves
from cfdrills.sequence_problems import can_sort_boxes, check_sums, min_tank_volume
from cfdrills.text_problems import abbreviate


class _Tokens:
    """Whitespace separated tokens of an input text, consumed in order."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _lines(answers) -> str:
    return "".join(f"{answer}\n" for answer in answers)


def _way_too_long_words(tokens: _Tokens) -> str:
    count = tokens.integer()
    return _lines(abbreviate(tokens.word()) for _ in range(count))


def _line_trip(tokens: _Tokens) -> str:
    def cases():
        for _ in range(tokens.integer()):
            stations_count = tokens.integer()
            destination = tokens.integer()
            stations = tokens.integers(stations_count)
            yield min_tank_volume(destination, stations)

    return _lines(cases())


def _divisibility(tokens: _Tokens) -> str:
    def cases():
        for _ in range(tokens.integer()):
            a = tokens.integer()
            b = tokens.integer()
            yield min_moves(a, b)

    return _lines(cases())


def _halloumi_boxes(tokens: _Tokens) -> str:
    def cases():
        for _ in range(tokens.integer()):
            size = tokens.integer()
            k = tokens.integer()
            values = tokens.integers(size)
            yield "YES" if can_sort_boxes(values, k) else "NO"

    return _lines(cases())


def _sums(tokens: _Tokens) -> str:
    def triples():
        for _ in range(tokens.integer()):
            a, b, c = tokens.integers(3)
            yield a, b, c

    return check_sums(triples())


PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "way-too-long-words": _way_too_long_words,
    "line-trip": _line_trip,
    "divisibility": _divisibility,
    "halloumi-boxes": _halloumi_boxes,
    "check-sums": _sums,
}


def solve(problem: str, text: str) -> str:
    """Answer the named problem for the input ``text``, formatted as it is printed."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        known = ", ".join(sorted(PROBLEMS))
        raise ValueError(f"unknown problem {problem!r}; choose one of {known}") from None
    return handler(_Tokens(text))


def main(argv=None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="cfdrills", description="Solve a multi-case exercise read from standard input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        answer = solve(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"cfdrills: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(answer)
    return 0