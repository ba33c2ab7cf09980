"""Filesystem helpers for locating and reading markdown files."""

from __future__ import annotations

from pathlib import Path

from markdown2json.config import MARKDOWN_EXTENSIONS
from markdown2json.exceptions import InputReadError


def is_markdown_file(path: Path) -> bool:
    """Return True if the path has a markdown extension (case-insensitive)."""
    return path.suffix.lower() in MARKDOWN_EXTENSIONS


def list_directory(path: Path) -> list[Path]:
    """List the entries of a directory in sorted name order.

    Raises:
        InputReadError: If the directory cannot be read.
    """
    try:
        return sorted(path.iterdir())
    except OSError as exc:
        raise InputReadError(path, exc) from exc


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file.

    Raises:
        InputReadError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(path, exc) from exc
