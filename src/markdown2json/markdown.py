"""Parse markdown into a node tree and flatten nodes to plain text."""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from markdown2json.config import MAX_NESTING
from markdown2json.exceptions import ParseError

# Node types whose literal content is the text itself.
_LITERAL_TYPES = frozenset({"text", "text_special", "code_inline"})


def create_parser(*, enable_tables: bool = False) -> MarkdownIt:
    """Create a CommonMark parser, optionally with GFM tables and strikethrough."""
    md = MarkdownIt("commonmark", {"maxNesting": MAX_NESTING})
    if enable_tables:
        md.enable(["table", "strikethrough"])
    return md


def parse_markdown(source: str, *, enable_tables: bool = False) -> list[SyntaxTreeNode]:
    """Parse markdown source and return the document's top-level nodes.

    Raises:
        ParseError: If the parser fails on the input, including documents
            nested too deeply to parse.
    """
    try:
        tokens = create_parser(enable_tables=enable_tables).parse(source)
        root = SyntaxTreeNode(tokens)
    except Exception as exc:
        raise ParseError(f"Failed to parse markdown: {exc}") from exc
    return list(root.children)


def flatten_node(node: SyntaxTreeNode) -> str:
    """Collect human-readable text from a node, dropping all formatting.

    Text runs and inline code spans contribute their literal content and
    soft line breaks contribute a newline. Every other node type contributes
    the concatenation of its children, so emphasis, links and image alt text
    keep their words while nodes without children (hard breaks, rules, raw
    HTML, nested code fences) contribute nothing.
    """
    parts: list[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in _LITERAL_TYPES:
            parts.append(current.content)
        elif current.type == "softbreak":
            parts.append("\n")
        else:
            stack.extend(reversed(current.children))
    return "".join(parts)
