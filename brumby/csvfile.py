"""Minimal comma-separated file reading and writing, without quoting."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Record:
    """A single row of string values."""

    items: list[str] = field(default_factory=list)

    @classmethod
    def with_capacity(cls, capacity: int) -> Record:
        """A record of ``capacity`` empty values."""
        return cls([""] * capacity)

    @classmethod
    def with_values(cls, values: Iterable[Any]) -> Record:
        """A record holding the string form of each value."""
        return cls([str(value) for value in values])

    def set(self, ordinal: int, value: Any) -> None:
        self.items[int(ordinal)] = str(value)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> str:
        return self.items[int(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self.items[int(index)] = str(value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)


class CsvWriter:
    """Writes records as comma-joined lines ending in a newline."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._file = open(path, "w", encoding="utf-8", newline="")

    def append(self, record: Iterable[str]) -> None:
        self._file.write(",".join(record))
        self._file.write("\n")

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> CsvWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class CsvReader:
    """Reads lines and splits each on commas into a :class:`Record`."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._file = open(path, "rb")

    def read(self) -> Record | None:
        """The next record, or ``None`` at the end of the file."""
        raw = self._file.readline()
        if not raw:
            return None
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        line = raw.decode("utf-8")
        return Record(line.split(","))

    def close(self) -> None:
        self._file.close()

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self.read()
        if record is None:
            raise StopIteration
        return record

    def __enter__(self) -> CsvReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()