"""Ingestion pipeline for markdown files -> section records."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from markdown2json.exceptions import MissingInputError, ParseError
from markdown2json.file_utils import is_markdown_file, list_directory, read_text
from markdown2json.schemas import DocumentRecord
from markdown2json.sections import index_markdown

logger = logging.getLogger(__name__)


@dataclass
class IngestionOptions:
    """Options for markdown ingestion.

    Attributes:
        max_depth: Maximum recursion depth below each input (the input
            itself is depth 0). None means unlimited.
        enable_tables: If True, parse GFM tables and strikethrough.
    """

    max_depth: int | None = None
    enable_tables: bool = False


def collect_markdown_files(path: Path, *, max_depth: int | None = None) -> list[Path]:
    """Find markdown files under a path, walking directories recursively.

    Args:
        path: A markdown file or a directory.
        max_depth: Paths deeper than this below ``path`` are skipped.

    Returns:
        Markdown files in traversal order.

    Raises:
        InputReadError: If a directory cannot be read.
    """
    found: list[Path] = []
    _collect(path, depth=0, max_depth=max_depth, found=found)
    return found


def _collect(path: Path, *, depth: int, max_depth: int | None, found: list[Path]) -> None:
    if max_depth is not None and depth > max_depth:
        logger.debug("Skipping %s: depth %d exceeds limit %d", path, depth, max_depth)
        return

    if path.is_dir():
        for child in list_directory(path):
            _collect(child, depth=depth + 1, max_depth=max_depth, found=found)
    elif is_markdown_file(path):
        found.append(path)


def index_file(path: Path, *, enable_tables: bool = False) -> list[DocumentRecord]:
    """Read one markdown file and return a record per section.

    Raises:
        InputReadError: If the file cannot be read.
        ParseError: If the markdown cannot be parsed.
    """
    source = read_text(path)
    try:
        sections = index_markdown(source, enable_tables=enable_tables)
    except ParseError as exc:
        raise ParseError(f"Failed to parse {path}: {exc}") from exc

    file_path = str(path)
    logger.debug("Indexed %s: %d sections", file_path, len(sections))
    return [section.to_record(file_path) for section in sections]


async def ingest_paths(
    paths: Sequence[Path | str],
    *,
    options: IngestionOptions | None = None,
) -> list[DocumentRecord]:
    """Index every markdown file reachable from the given inputs.

    All inputs are checked before any file is read. Files are indexed
    concurrently on worker threads and their records concatenated in
    traversal order.

    Args:
        paths: Markdown files or directories.
        options: Processing options. Uses defaults if None.

    Returns:
        Records for every section of every file.

    Raises:
        MissingInputError: If any input path does not exist.
        InputReadError: If a file or directory cannot be read.
        ParseError: If a file cannot be parsed.
    """
    opts = options or IngestionOptions()
    inputs = [Path(path) for path in paths]

    missing = [str(path) for path in inputs if not path.exists()]
    if missing:
        raise MissingInputError(missing)

    files: list[Path] = []
    for path in inputs:
        files.extend(
            await asyncio.to_thread(collect_markdown_files, path, max_depth=opts.max_depth)
        )

    results = await asyncio.gather(
        *(
            asyncio.to_thread(index_file, file, enable_tables=opts.enable_tables)
            for file in files
        )
    )

    records: list[DocumentRecord] = []
    for file_records in results:
        records.extend(file_records)
    logger.debug("Indexed %d files into %d records", len(files), len(records))
    return records
