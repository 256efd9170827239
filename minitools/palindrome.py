"""Check whether the letters of a line read the same in both directions."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _is_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def _upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def _matches(first: str, second: str) -> bool:
    return first == second or _upper(first) == second or first == _upper(second)


def is_letter_palindrome(text: str) -> bool:
    """Compare letters from both ends, ignoring case and non-letters.

    When no letter is found while scanning, the character at the current
    position is compared as it is.
    """
    if not text:
        return True
    start, end = 0, len(text) - 1
    while True:
        end = next((i for i in range(end, -1, -1) if _is_letter(text[i])), end)
        start = next((i for i in range(start, len(text)) if _is_letter(text[i])), start)
        if not _matches(text[start], text[end]):
            return False
        if end - start == 1 or start >= end:
            return True
        start, end = start + 1, end - 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``true`` or ``false`` for every line of standard input."""
    for line in sys.stdin:
        print("true" if is_letter_palindrome(line.rstrip("\n")) else "false")
    return 0


if __name__ == "__main__":
    sys.exit(main())