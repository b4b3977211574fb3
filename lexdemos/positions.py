"""Report the line and column of every word in a text."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_PATTERN = re.compile(r"\w+|\n")


@dataclass(frozen=True)
class Word:
    """A word with its zero-based line and column."""

    text: str
    line: int
    column: int


def word_positions(source: str) -> Iterator[Word]:
    """Yield each word of ``source`` with where it starts."""
    line = 0
    line_start = 0
    for match in _PATTERN.finditer(source):
        if match.group() == "\n":
            line += 1
            line_start = match.end()
            continue
        yield Word(match.group(), line, match.start() - line_start)


def main(argv: list[str] | None = None) -> int:
    """Print the position of every word in the file named on the command line."""
    parser = argparse.ArgumentParser(prog="positions", description="List word positions in a file.")
    parser.add_argument("path", help="file to scan")
    args = parser.parse_args(argv)
    source = Path(args.path).read_text(encoding="utf-8")
    for word in word_positions(source):
        print(f"Word '{word.text}' found at ({word.line}, {word.column})")
    return 0


if __name__ == "__main__":
    sys.exit(main())