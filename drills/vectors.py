"""Magnitude and normalisation of 3-D vectors."""

from __future__ import annotations

import argparse
import math
from typing import MutableSequence, Sequence


def magnitude(vector: Sequence[float]) -> float:
    """Return the Euclidean length of ``vector``."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: MutableSequence[float]) -> None:
    """Scale ``vector`` in place to length 1.0 without changing its direction."""
    mag = magnitude(vector)
    if mag == 0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    vector[:] = [coord / mag for coord in vector]


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Demonstrate vector normalisation.").parse_args(
        argv
    )
    print(f"Magnitude of a unit vector: {magnitude([0.0, 1.0, 0.0])}")
    v = [1.0, 2.0, 9.0]
    print(f"Magnitude of {v}: {magnitude(v)}")
    normalize(v)
    print(f"Magnitude of {v} after normalization: {magnitude(v)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())