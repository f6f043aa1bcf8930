"""File and directory helpers."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any


def read_json(path: str | os.PathLike[str]) -> Any:
    """Read a JSON-encoded value from ``path``."""
    with open(path, encoding="utf-8") as file:
        return json.load(file)


def write_json(path: str | os.PathLike[str], value: Any) -> None:
    """Write ``value`` to ``path`` as pretty-printed JSON."""
    with open(path, "w", encoding="utf-8") as file:
        json.dump(value, file, indent=2)


def recurse_dir(
    path: str | os.PathLike[str], extension_filter: Callable[[str], bool]
) -> list[Path]:
    """Find all files under ``path`` whose extension passes the filter.

    The filter receives the extension without its dot, or an empty string
    where there is none. If ``path`` is itself a matching file, it is the
    only result.
    """
    root = Path(path)
    root.stat()
    if root.is_dir():
        files: list[Path] = []
        for entry in sorted(root.iterdir()):
            files.extend(recurse_dir(entry, extension_filter))
        return files
    if extension_filter(root.suffix[1:]):
        return [root]
    return []