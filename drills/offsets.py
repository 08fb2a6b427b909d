"""Differences between elements at a wrapping offset."""

from __future__ import annotations

from itertools import cycle, islice
from typing import Sequence


def offset_differences(offset: int, values: Sequence[int]) -> list[int]:
    """Return ``values[(n + offset) % len] - values[n]`` for every index ``n``."""
    shifted = islice(cycle(values), offset, None)
    return [later - earlier for earlier, later in zip(values, shifted)]