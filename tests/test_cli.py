"""Tests for the command-line interface."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from markdown2json.cli import main, parse_arguments
from markdown2json.exceptions import UsageError


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_parses_multiple_inputs_with_depth(self) -> None:
        assert parse_arguments(["input1", "input2", "--depth", "3"]) == (
            ["input1", "input2"],
            3,
        )

    def test_short_depth_flag(self) -> None:
        assert parse_arguments(["input1", "-d", "0"]) == (["input1"], 0)

    def test_depth_is_optional(self) -> None:
        assert parse_arguments(["input1"]) == (["input1"], None)

    def test_depth_accepts_leading_plus(self) -> None:
        assert parse_arguments(["input1", "--depth", "+3"]) == (["input1"], 3)

    def test_errors_on_missing_depth_value(self) -> None:
        with pytest.raises(UsageError, match="Expected a value after --depth/-d"):
            parse_arguments(["input1", "--depth"])

    def test_errors_when_flag_precedes_inputs(self) -> None:
        with pytest.raises(UsageError, match="Unknown flag or flag placed before inputs"):
            parse_arguments(["-d", "2", "input1"])

    def test_errors_on_unknown_flag(self) -> None:
        with pytest.raises(UsageError, match="--verbose"):
            parse_arguments(["input1", "--verbose"])

    @pytest.mark.parametrize("value", ["abc", "-1", "1.5", "1_0", " 3", "3 ", "\u0663"])
    def test_errors_on_invalid_depth(self, value: str) -> None:
        with pytest.raises(UsageError, match=re.escape(f"Invalid depth value: {value}")):
            parse_arguments(["input1", "--depth", value])

    def test_errors_without_inputs(self) -> None:
        with pytest.raises(UsageError, match="usage:"):
            parse_arguments([])

    def test_errors_with_depth_but_no_inputs(self) -> None:
        with pytest.raises(UsageError, match="usage:"):
            parse_arguments(["--depth", "2"])


class TestMain:
    """Tests for the main entry point."""

    def test_writes_json_with_trailing_newline(
        self, docs_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(docs_tree / "a.md")])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.endswith("]\n")
        assert json.loads(out) == [
            {
                "file_path": str(docs_tree / "a.md"),
                "header": "A",
                "text_blocks": ["Alpha text."],
                "code_blocks": [],
            }
        ]

    def test_depth_limits_folder_walk(
        self, docs_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(docs_tree), "--depth", "2"])

        records = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert [record["header"] for record in records] == ["A", "B"]
        assert records[1]["code_blocks"] == ["echo b"]

    def test_no_markdown_found_prints_empty_array(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(tmp_path)])

        assert exit_code == 0
        assert capsys.readouterr().out == "[]\n"

    def test_missing_inputs_listed_without_output(
        self, docs_tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = [str(tmp_path / "nope.md"), str(tmp_path / "gone")]

        exit_code = main([missing[0], str(docs_tree), missing[1]])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "The following input paths do not exist:" in captured.err
        for path in missing:
            assert f"  - {path}" in captured.err

    def test_usage_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["-d", "2", "input1"])

        captured = capsys.readouterr()
        assert exit_code == 2
        assert captured.out == ""
        assert "Unknown flag or flag placed before inputs: -d" in captured.err

    def test_read_error_aborts_without_output(
        self, docs_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (docs_tree / "broken.md").write_bytes(b"\xff\xfe\xfd")

        exit_code = main([str(docs_tree)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "broken.md" in captured.err

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--help"]) == 0
        assert "--depth" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv", [["README.md", "-h"], ["README.md", "--help", "x.md"], ["README.md", "-d", "-h"]]
    )
    def test_help_after_inputs_is_rejected(
        self, argv: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Help is only honoured as the sole argument."""
        exit_code = main(argv)

        captured = capsys.readouterr()
        assert exit_code == 2
        assert captured.out == ""
        assert "-h" in captured.err or "--help" in captured.err
