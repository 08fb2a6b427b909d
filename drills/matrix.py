"""Matrix transposition."""

from __future__ import annotations

import argparse
from pprint import pformat
from typing import Sequence


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix as a new list of rows."""
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("all rows must have the same length")
    return [list(column) for column in zip(*matrix)]


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Transpose a sample matrix.").parse_args(argv)
    matrix = [
        [101, 102, 103],
        [201, 202, 203],
        [301, 302, 303],
    ]
    print(f"matrix: {pformat(matrix, width=20)}")
    print(f"transposed: {pformat(transpose(matrix), width=20)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())