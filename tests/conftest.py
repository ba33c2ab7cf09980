"""Test setup for markdown2json."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A small folder of markdown and non-markdown files.

    docs/
        a.md
        notes.txt
        sub/
            b.MARKDOWN
            deeper/
                c.md
    """
    root = tmp_path / "docs"
    deeper = root / "sub" / "deeper"
    deeper.mkdir(parents=True)
    (root / "a.md").write_text("# A\n\nAlpha text.\n", encoding="utf-8")
    (root / "notes.txt").write_text("# Not markdown\n", encoding="utf-8")
    (root / "sub" / "b.MARKDOWN").write_text(
        "# B\n\n```sh\necho b\n```\n", encoding="utf-8"
    )
    (deeper / "c.md").write_text("Intro before heading.\n\n## C\n", encoding="utf-8")
    return root
