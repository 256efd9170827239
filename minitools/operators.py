"""Find operators between numbers so that they evaluate, left to right, to a target."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import zip_longest

_OPERATIONS = (
    ("+", lambda a, b: a + b),
    ("-", lambda a, b: a - b),
    ("*", lambda a, b: a * b),
)


def find_operators(numbers: Sequence[int], target: int) -> list[str] | None:
    """Return the operators to place between ``numbers``, or None if none work.

    Expressions are evaluated strictly left to right, trying ``+``, ``-``
    and ``*`` in that order.
    """
    numbers = list(numbers)

    def search(index: int, value: int) -> list[str] | None:
        if index == len(numbers):
            return [] if value == target else None
        for symbol, operation in _OPERATIONS:
            rest = search(index + 1, operation(value, numbers[index]))
            if rest is not None:
                return rest if index == 0 else [symbol, *rest]
            if index == 0:
                break
        return None

    return search(0, 0)


def format_solution(numbers: Sequence[int], operators: Sequence[str], target: int) -> str:
    """Render an equation such as ``1+2*3=9``."""
    body = "".join(f"{number}{op}" for number, op in zip_longest(numbers, operators, fillvalue=""))
    return f"{body}={target}"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count, the numbers and the target from standard input."""
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
        numbers = [int(token) for token in tokens[1:count]]
        target = int(tokens[max(count, 1)])
    except (IndexError, ValueError):
        print("malformed input", file=sys.stderr)
        return 1
    operators = find_operators(numbers, target)
    if operators is None:
        print("No Solution!")
    else:
        sys.stdout.write(format_solution(numbers, operators, target))
    return 0


if __name__ == "__main__":
    sys.exit(main())