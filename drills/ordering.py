"""The smaller of two comparable values."""

from __future__ import annotations

import argparse
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def minimum(left: T, right: T) -> T:
    """Return the smaller argument; ``left`` wins when they compare equal."""
    return right if right < left else left


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Check the minimum function.").parse_args(argv)
    assert minimum(0, 10) == 0
    assert minimum(500, 123) == 123
    assert minimum("a", "z") == "a"
    assert minimum("7", "1") == "1"
    assert minimum("hello", "goodbye") == "goodbye"
    assert minimum("bat", "armadillo") == "armadillo"
    return 0


if __name__ == "__main__":
    raise SystemExit(main())