"""Command-line image editor applying a chain of filters to BMP files."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from minitools.bmp import Bmp, BmpError
from minitools.filters import Emboss, Filter, GaussianBlur, GrayScale, Invert, Sharpen

_FLAGS = {
    "-B": GaussianBlur,
    "-S": Sharpen,
    "-E": Emboss,
    "-I": Invert,
    "-G": GrayScale,
}


@dataclass(frozen=True)
class Step:
    """One filter in the chain, optionally limited to a view ``(x, y, w, h)``."""

    filter: Filter
    view: tuple[int, int, int, int] | None = None

    def run(self, image: Bmp) -> None:
        if self.view is None:
            self.filter.apply(image)
        else:
            self.filter.apply_with_view(image, *self.view)


def _parse_view(token: str) -> tuple[int, int, int, int]:
    parts = token.split(":")[:4]
    try:
        values = [int(part) for part in parts]
    except ValueError:
        raise ValueError(f"invalid view {token!r}") from None
    values += [0] * (4 - len(values))
    return (values[0], values[1], values[2], values[3])


def parse_arguments(argv: Sequence[str]) -> tuple[list[Step], list[tuple[str, str]]]:
    """Parse filter flags, views and input/output file pairs.

    A view ``x:y:w:h`` applies to the filter just before it; a view
    given before any filter is ignored.
    """
    steps: list[Step] = []
    files: list[tuple[str, str]] = []
    tokens = iter(argv)
    for token in tokens:
        if token in _FLAGS:
            steps.append(Step(_FLAGS[token]()))
        elif ":" in token:
            view = _parse_view(token)
            if steps:
                steps[-1] = replace(steps[-1], view=view)
        else:
            output = next(tokens, None)
            if output is None:
                raise ValueError(
                    "Each input file name should be followed by an output file name."
                )
            files.append((token, output))
    return steps, files


def read_file_names(stream: Iterable[str]) -> list[tuple[str, str]]:
    """Read ``input output`` pairs, one per line; shorter lines are skipped."""
    files = []
    for line in stream:
        words = line.split()
        if len(words) >= 2:
            files.append((words[0], words[1]))
    return files


def process_files(steps: Sequence[Step], files: Iterable[tuple[str, str]]) -> None:
    """Read each input, run every step on it and write the output."""
    for source, target in files:
        image = Bmp.read(source)
        for step in steps:
            step.run(image)
        image.write(target)


def main(argv: Sequence[str] | None = None) -> int:
    """Apply the filters named in ``argv`` to the file pairs on standard input."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        steps, _ = parse_arguments(argv)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    files = read_file_names(sys.stdin)
    try:
        process_files(steps, files)
    except (BmpError, OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())