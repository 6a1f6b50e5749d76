"""
Unbiased shuffle shared by quiz generation and study decks.

Fisher-Yates: walk from the last index down to 1, swapping each element with
a uniformly chosen element at an index in [0, i]. Not for security use.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a shuffled copy of items; the input is left untouched.

    Args:
        items: Sequence to shuffle
        rng: Optional random source (tests pass a seeded Random)

    Returns:
        New list holding a uniform random permutation of items
    """
    source = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = source.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
