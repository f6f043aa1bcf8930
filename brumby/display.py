"""Textual rendering of slices and inclusive ranges."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def format_slice(items: Iterable[Any]) -> str:
    """Render items as ``[a, b, c]`` using their ``str`` form."""
    return "[" + ", ".join(str(item) for item in items) + "]"


def format_range_inclusive(start: Any, end: Any) -> str:
    """Render an inclusive range as ``start-end``."""
    return f"{start}-{end}"