"""Length of Collatz sequences."""

from __future__ import annotations

import argparse


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence that starts at ``n``."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the length of a Collatz sequence."
    )
    parser.add_argument("n", nargs="?", type=int, default=11, help="starting value")
    args = parser.parse_args(argv)
    print(f"Length: {collatz_length(args.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())