"""Cartesian power of a sequence with the first position varying fastest."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import TypeVar

__all__ = ["cartesian_product"]

T = TypeVar("T")


def _generate(items: list[T], n: int) -> Iterator[tuple[T, ...]]:
    for combo in itertools.product(items, repeat=n):
        yield combo[::-1]


def cartesian_product(iterable: Iterable[T], n: int) -> Iterator[tuple[T, ...]]:
    """Yield every n-tuple of elements; the first element changes fastest.

    An empty input yields nothing, whatever ``n`` is.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    items = list(iterable)
    if not items:
        return iter(())
    return _generate(items, n)