"""Factorial calculators."""

from __future__ import annotations

MAX_FACTORIAL_ENTRIES = 35
_MAX_N = MAX_FACTORIAL_ENTRIES - 1


class Calculator:
    """Computes factorials on demand, up to 34!."""

    def get(self, n: int) -> int:
        if n < 0:
            raise ValueError(f"{n}! is undefined")
        if n > _MAX_N:
            raise ValueError(f"{n}! overflows")
        product = 1
        for i in range(2, n + 1):
            product *= i
        return product


class Lookup:
    """Serves factorials from a precomputed table of 0! to 34!."""

    def __init__(self) -> None:
        entries = [1] * MAX_FACTORIAL_ENTRIES
        for i in range(2, MAX_FACTORIAL_ENTRIES):
            entries[i] = i * entries[i - 1]
        self._entries = tuple(entries)

    def get(self, n: int) -> int:
        if not 0 <= n < len(self._entries):
            raise IndexError(f"no factorial entry for {n}")
        return self._entries[n]