"""Split a parsed markdown document into flat sections."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from markdown_it.common.utils import unescapeAll
from markdown_it.tree import SyntaxTreeNode

from markdown2json.config import PREAMBLE_TITLE
from markdown2json.markdown import flatten_node, parse_markdown
from markdown2json.schemas import CodeBlock, Section

_CODE_BLOCK_TYPES = frozenset({"fence", "code_block"})


class NodeKind(str, Enum):
    """How the segmenter treats a top-level node."""

    HEADING = "heading"
    CODE_BLOCK = "code_block"
    CONTENT = "content"


def classify_node(node: SyntaxTreeNode) -> NodeKind:
    """Map a node onto heading, code block, or flattenable content."""
    if node.type == "heading":
        return NodeKind.HEADING
    if node.type in _CODE_BLOCK_TYPES:
        return NodeKind.CODE_BLOCK
    return NodeKind.CONTENT


def heading_level(node: SyntaxTreeNode) -> int:
    """Return the depth of a heading node (``h1`` -> 1)."""
    return int(node.tag[1:])


def split_info_string(info: str) -> tuple[str | None, str | None]:
    """Split a fence info string into language and metadata tags.

    The raw string is split first, then escapes and entities are decoded.
    """
    parts = info.strip().split(maxsplit=1)
    lang = unescapeAll(parts[0]) if parts else None
    meta = unescapeAll(parts[1].strip()) if len(parts) > 1 else None
    return lang or None, meta or None


def code_block_from_node(node: SyntaxTreeNode) -> CodeBlock:
    """Build a code block record from a fenced or indented code node.

    The value excludes the line ending before the closing fence.
    """
    lang, meta = split_info_string(node.info)
    return CodeBlock(lang=lang, meta=meta, value=node.content.removesuffix("\n"))


def segment_sections(nodes: Iterable[SyntaxTreeNode]) -> list[Section]:
    """Group top-level nodes into sections, each starting at a heading.

    All text and code until the next heading belongs to that section.
    Sections are flat: a nested heading starts a new section that keeps its
    own level. Content before the first heading goes into a single
    preamble section with level 0.
    """
    sections: list[Section] = []
    current: Section | None = None

    for node in nodes:
        kind = classify_node(node)

        if kind is NodeKind.HEADING:
            if current is not None:
                sections.append(current)
            current = Section(title=flatten_node(node), level=heading_level(node))
            continue

        if kind is NodeKind.CODE_BLOCK:
            if current is None:
                current = _new_preamble()
            current.code_blocks.append(code_block_from_node(node))
            continue

        text = flatten_node(node)
        if not text.strip():
            continue
        if current is None:
            current = _new_preamble()
        current.body_text.append(text)

    if current is not None:
        sections.append(current)

    return sections


def index_markdown(source: str, *, enable_tables: bool = False) -> list[Section]:
    """Parse markdown source and split it into sections.

    Raises:
        ParseError: If the parser fails on the input.
    """
    return segment_sections(parse_markdown(source, enable_tables=enable_tables))


def _new_preamble() -> Section:
    return Section(title=PREAMBLE_TITLE, level=0)
