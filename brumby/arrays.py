"""Collecting iterables into fixed-size sequences."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import TypeVar

T = TypeVar("T")


class CapacityExceeded(ValueError):
    """More items were supplied than the capacity allows."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"capacity of {capacity} exceeded")
        self.capacity = capacity


class IncompletelyFilled(ValueError):
    """Fewer items were supplied than the capacity requires."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"capacity of {capacity} not completely filled")
        self.capacity = capacity


def collect_exact(iterable: Iterable[T], capacity: int) -> tuple[T, ...]:
    """Collect exactly ``capacity`` items from ``iterable`` into a tuple."""
    items = tuple(islice(iterable, capacity + 1))
    if len(items) > capacity:
        raise CapacityExceeded(capacity)
    if len(items) < capacity:
        raise IncompletelyFilled(capacity)
    return items