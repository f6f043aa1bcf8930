"""Bidirectional mapping between items and their insertion indices."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class DuplicateItemError(ValueError):
    """Raised when an item is added that is already present."""

    def __init__(self, index: int, existing_index: int) -> None:
        super().__init__(
            f"duplicate item at index {index}, previously at {existing_index}"
        )
        self.index = index
        self.existing_index = existing_index


class HashLookup(Generic[T]):
    """An ordered collection of unique items with O(1) index lookup."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._item_to_index: dict[T, int] = {}
        self._index_to_item: list[T] = []
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        index = len(self._index_to_item)
        existing_index = self._item_to_index.get(item)
        if existing_index is not None:
            raise DuplicateItemError(index, existing_index)
        self._item_to_index[item] = index
        self._index_to_item.append(item)

    def item_at(self, index: int) -> T | None:
        if 0 <= index < len(self._index_to_item):
            return self._index_to_item[index]
        return None

    def index_of(self, item: T) -> int | None:
        return self._item_to_index.get(item)

    def items(self) -> tuple[T, ...]:
        return tuple(self._index_to_item)

    def __len__(self) -> int:
        return len(self._index_to_item)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._index_to_item):
            raise IndexError(f"no item at index {index}")
        return self._index_to_item[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._index_to_item)

    def __repr__(self) -> str:
        return f"HashLookup({self._index_to_item!r})"