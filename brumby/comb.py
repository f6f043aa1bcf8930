"""Combinatorics over mixed-radix ordinal spaces."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence


def pick(cardinalities: Sequence[int], permutation: int) -> list[int]:
    """Decode a permutation number into ordinals.

    The first position varies fastest.
    """
    ordinals = []
    residual = permutation
    for cardinality in cardinalities:
        residual, remainder = divmod(residual, cardinality)
        ordinals.append(remainder)
    return ordinals


def count_permutations(cardinalities: Iterable[int]) -> int:
    """Number of distinct ordinal combinations for the given cardinalities."""
    return math.prod(cardinalities, start=1)


class Permuter:
    """Iterable over every ordinal combination for a set of cardinalities."""

    def __init__(self, cardinalities: Sequence[int]) -> None:
        self._cardinalities = tuple(cardinalities)
        self._permutations = count_permutations(self._cardinalities)

    def __iter__(self) -> Iterator[list[int]]:
        for permutation in range(self._permutations):
            yield pick(self._cardinalities, permutation)

    def __len__(self) -> int:
        return self._permutations


def is_unique_quadratic(elements: Sequence[int]) -> bool:
    """True if no element repeats, by pairwise comparison."""
    for index, element in enumerate(elements):
        if element in elements[index + 1:]:
            return False
    return True


def is_unique_linear(elements: Iterable[int], size: int) -> bool:
    """True if no element repeats; elements must lie in ``range(size)``."""
    seen = [False] * size
    for element in elements:
        if seen[element]:
            return False
        seen[element] = True
    return True