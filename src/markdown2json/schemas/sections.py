"""Section models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from markdown2json.schemas.records import DocumentRecord


class CodeBlock(BaseModel):
    """A top-level code block, kept verbatim."""

    lang: str | None = None
    meta: str | None = None
    value: str


class Section(BaseModel):
    """A flat run of content anchored at one heading.

    Attributes:
        title: Plain-text heading, or the preamble sentinel.
        level: Heading depth (1-6), or 0 for the preamble section.
        body_text: Flattened text of each contributing node, in order.
        code_blocks: Top-level code blocks, in order.
    """

    title: str
    level: int = Field(..., ge=0, le=6)
    body_text: list[str] = Field(default_factory=list)
    code_blocks: list[CodeBlock] = Field(default_factory=list)

    def to_record(self, file_path: str) -> DocumentRecord:
        """Build the boundary record for this section.

        Only the literal value of each code block is kept.
        """
        return DocumentRecord(
            file_path=file_path,
            header=self.title,
            text_blocks=list(self.body_text),
            code_blocks=[block.value for block in self.code_blocks],
        )
