"""Shared schemas for markdown2json."""

from markdown2json.schemas.records import DocumentRecord
from markdown2json.schemas.sections import CodeBlock, Section

__all__ = ["CodeBlock", "DocumentRecord", "Section"]
