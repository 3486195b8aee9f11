"""k-subset enumeration and binomial coefficients."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """Lazily yield every k-subset of ``items``.

    Subsets keep the relative order of ``items`` and come out in
    lexicographic index order, which is the order a "first element included,
    then excluded" recursive split produces. Out-of-range ``k`` yields nothing.
    """
    values = tuple(items)
    if k < 0 or k > len(values):
        return iter(())
    return itertools.combinations(values, k)


def binomial(n: int, k: int) -> int:
    """Return C(n, k) using the multiplicative formula with exact integers."""
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        # Each partial product is C(n, i + 1), so the division is exact.
        result = result * (n - i) // (i + 1)
    return result
