"""A reader that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import argparse
import functools
import io
import string
from typing import BinaryIO


@functools.lru_cache(maxsize=None)
def _table(rot: int) -> bytes:
    shift = rot % 26
    upper = string.ascii_uppercase
    lower = string.ascii_lowercase
    source = (upper + lower).encode("ascii")
    target = (upper[shift:] + upper[:shift] + lower[shift:] + lower[:shift]).encode(
        "ascii"
    )
    return bytes.maketrans(source, target)


def rotate(data: bytes, rot: int) -> bytes:
    """Rotate every ASCII letter in ``data`` by ``rot``; other bytes are kept."""
    return bytes(data).translate(_table(rot))


class RotDecoder(io.RawIOBase):
    """A readable stream that rotates ASCII letters read from ``stream``."""

    def __init__(self, stream: BinaryIO, rot: int) -> None:
        super().__init__()
        self._stream = stream
        self.rot = rot

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        view = memoryview(buffer).cast("B")
        data = self._stream.read(len(view))
        if data is None:
            return None
        size = len(data)
        view[:size] = rotate(data, self.rot)
        return size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode a rotated message.")
    parser.add_argument("text", nargs="?", default="Gb trg gb gur bgure fvqr!")
    parser.add_argument("--rot", type=int, default=13)
    args = parser.parse_args(argv)
    decoder = RotDecoder(io.BytesIO(args.text.encode()), args.rot)
    print(decoder.read().decode())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())