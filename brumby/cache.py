"""Hit and miss counts of a cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CacheStats:
    """Counts cache hits and misses.

    Adding ``True`` records a hit, ``False`` a miss; adding another
    ``CacheStats`` sums the counts.
    """

    hits: int = 0
    misses: int = 0

    def __add__(self, other: Any) -> CacheStats:
        if isinstance(other, bool):
            if other:
                return CacheStats(self.hits + 1, self.misses)
            return CacheStats(self.hits, self.misses + 1)
        if isinstance(other, CacheStats):
            return CacheStats(self.hits + other.hits, self.misses + other.misses)
        return NotImplemented

    def __iadd__(self, other: Any) -> CacheStats:
        if isinstance(other, bool):
            if other:
                self.hits += 1
            else:
                self.misses += 1
            return self
        if isinstance(other, CacheStats):
            self.hits += other.hits
            self.misses += other.misses
            return self
        return NotImplemented