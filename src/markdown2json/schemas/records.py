"""Boundary record model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DocumentRecord(BaseModel):
    """One section of one file, as written to the JSON index."""

    file_path: str
    header: str
    text_blocks: list[str] = Field(default_factory=list)
    code_blocks: list[str] = Field(default_factory=list)
