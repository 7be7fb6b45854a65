"""Small helpers for reading files from disk."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of a file as UTF-8 text.

    Raises OSError when the file cannot be opened.
    """
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True when something exists at ``path``."""
    return os.path.exists(path)