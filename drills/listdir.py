"""Iterating over the entries of a directory."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
from pprint import pformat
from typing import Iterator, Union

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class DirectoryIterator(Iterator[str]):
    """Yields every entry name of a directory, ``.`` and ``..`` included."""

    def __init__(self, path: PathLike) -> None:
        path = os.fsdecode(path)
        if "\0" in path:
            raise ValueError(f"Invalid path: {path!r} contains a NUL byte")
        try:
            self._scandir = os.scandir(path)
        except OSError as err:
            raise OSError(err.errno, f"Could not open {path!r}", path) from err
        self.path = path
        self._names: Iterator[str] = itertools.chain(
            (os.curdir, os.pardir), (entry.name for entry in self._scandir)
        )

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self) -> str:
        try:
            return next(self._names)
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        """Release the directory handle; iteration then ends."""
        scandir = getattr(self, "_scandir", None)
        if scandir is not None:
            scandir.close()
        self._names = iter(())

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the entries of a directory.")
    parser.add_argument("path", nargs="?", default=".")
    args = parser.parse_args(argv)
    try:
        with DirectoryIterator(args.path) as entries:
            print(f"files: {pformat(list(entries))}")
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())