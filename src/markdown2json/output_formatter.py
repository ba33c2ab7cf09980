"""Serialize section records to the JSON index format."""

from __future__ import annotations

from typing import Iterable

from pydantic import TypeAdapter

from markdown2json.config import MARKDOWN2JSON_JSON_INDENT
from markdown2json.schemas import DocumentRecord

_RECORDS_ADAPTER = TypeAdapter(list[DocumentRecord])


def render_records(
    records: Iterable[DocumentRecord], *, indent: int = MARKDOWN2JSON_JSON_INDENT
) -> str:
    """Render records as a pretty-printed JSON array.

    Non-ASCII text is written as-is rather than escaped.
    """
    return _RECORDS_ADAPTER.dump_json(list(records), indent=indent).decode("utf-8")
