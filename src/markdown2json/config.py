"""Local configuration for markdown2json."""

from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_INDENT = 2

MARKDOWN_EXTENSIONS = (".md", ".markdown")
PREAMBLE_TITLE = "(preamble)"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


MARKDOWN2JSON_LOG_LEVEL = os.getenv("MARKDOWN2JSON_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# Turns on the GFM table and strikethrough rules for CLI runs.
MARKDOWN2JSON_ENABLE_TABLES = _env_flag("MARKDOWN2JSON_ENABLE_TABLES")
MARKDOWN2JSON_JSON_INDENT = int(os.getenv("MARKDOWN2JSON_JSON_INDENT", str(DEFAULT_JSON_INDENT)))
# Parser nesting limit. Blocks nested deeper than this are dropped by the
# parser, so it must stay above the depth Python recursion allows.
MAX_NESTING = 10_000
