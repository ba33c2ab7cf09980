"""Custom exceptions for markdown2json."""

from __future__ import annotations

from pathlib import Path


class Markdown2jsonError(Exception):
    """Base exception for markdown2json operations."""


class ParseError(Markdown2jsonError):
    """Error raised by the markdown parser."""


class UsageError(Markdown2jsonError):
    """Invalid command-line arguments."""


class InputError(Markdown2jsonError):
    """Error with the requested input paths."""


class MissingInputError(InputError):
    """One or more input paths do not exist."""

    def __init__(self, paths: list[str]) -> None:
        self.paths = list(paths)
        lines = ["The following input paths do not exist:"]
        lines.extend(f"  - {path}" for path in self.paths)
        super().__init__("\n".join(lines))


class InputReadError(InputError):
    """A file or directory could not be read."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = str(path)
        super().__init__(f"Failed to read {self.path}: {reason}")
