"""Fibonacci numbers."""

from __future__ import annotations

import argparse


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a Fibonacci number.")
    parser.add_argument("n", nargs="?", type=int, default=20, help="index")
    args = parser.parse_args(argv)
    print(f"fib({args.n}) = {fib(args.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())