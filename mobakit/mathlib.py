"""Small numeric helpers: range wrapping and inclusive random ranges."""

from __future__ import annotations

import math
import random


def normalize(value: float, start: float, end: float) -> float:
    """Wrap ``value`` into the range ``[start, end)``, treating it as cyclic."""
    width = end - start
    offset = value - start
    return (offset - math.floor(offset / width) * width) + start


def random_range(start: float, end: float) -> float:
    """Return a random number between ``start`` and ``end``.

    Integer bounds give an integer with both ends included; otherwise a
    uniformly distributed float is returned. Equal bounds return ``start``.
    """
    if start == end:
        return start
    if isinstance(start, int) and isinstance(end, int):
        return random.randint(start, end)
    return random.uniform(start, end)