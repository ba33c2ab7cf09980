"""markdown2json: index markdown documents into flat section records."""

from markdown2json.exceptions import (
    InputError,
    InputReadError,
    Markdown2jsonError,
    MissingInputError,
    ParseError,
    UsageError,
)
from markdown2json.ingestion import IngestionOptions, index_file, ingest_paths
from markdown2json.markdown import flatten_node, parse_markdown
from markdown2json.schemas import CodeBlock, DocumentRecord, Section
from markdown2json.sections import index_markdown, segment_sections

__all__ = [
    "CodeBlock",
    "DocumentRecord",
    "IngestionOptions",
    "InputError",
    "InputReadError",
    "Markdown2jsonError",
    "MissingInputError",
    "ParseError",
    "Section",
    "UsageError",
    "flatten_node",
    "index_file",
    "index_markdown",
    "ingest_paths",
    "parse_markdown",
    "segment_sections",
]
