"""Command-line entry point: index markdown files into a JSON array."""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
from typing import Sequence

from markdown2json.config import MARKDOWN2JSON_ENABLE_TABLES
from markdown2json.exceptions import Markdown2jsonError, UsageError
from markdown2json.ingestion import IngestionOptions, ingest_paths
from markdown2json.output_formatter import render_records
from markdown2json.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_DEPTH_FLAGS = ("--depth", "-d")
_HELP_FLAGS = ("-h", "--help")
# Unsigned decimal, optionally with a leading plus sign.
_DEPTH_RE = re.compile(r"\+?[0-9]+")
_USAGE_NOTES = (
    "  - Each input can be a markdown file or a folder.\n"
    "  - The optional --depth/-d flag must come after all inputs."
)


def build_parser(prog: str = "markdown2json") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s <input1> [input2 ...] [--depth N]",
        description="Index markdown files into JSON records, one per heading section.",
        epilog=_USAGE_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("inputs", nargs="+", metavar="input", help="Markdown file or folder")
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth_value,
        default=None,
        metavar="N",
        help="Maximum folder recursion depth (inputs are depth 0)",
    )
    return parser


def _depth_value(value: str) -> int:
    if not _DEPTH_RE.fullmatch(value):
        raise argparse.ArgumentTypeError(f"Invalid depth value: {value}")
    return int(value)


def check_argument_order(args: Sequence[str], parser: argparse.ArgumentParser) -> None:
    """Validate that inputs come first and the depth flag, if any, comes last.

    Raises:
        UsageError: With a user-facing message describing the problem.
    """
    usage = _usage_text(parser)
    if not args:
        raise UsageError(usage)

    if args[-1] in _DEPTH_FLAGS:
        raise UsageError("Expected a value after --depth/-d")

    inputs = list(args)
    if len(inputs) >= 2 and inputs[-2] in _DEPTH_FLAGS:
        try:
            _depth_value(inputs[-1])
        except argparse.ArgumentTypeError as exc:
            raise UsageError(str(exc)) from exc
        inputs = inputs[:-2]

    if not inputs:
        raise UsageError(usage)

    for arg in inputs:
        if arg.startswith("-"):
            raise UsageError(f"Unknown flag or flag placed before inputs: {arg}\n{usage}")


def parse_arguments(
    args: Sequence[str], parser: argparse.ArgumentParser | None = None
) -> tuple[list[str], int | None]:
    """Parse CLI arguments into input paths and an optional depth limit.

    Raises:
        UsageError: If the arguments are missing, malformed, or out of order.
    """
    parser = parser or build_parser()
    check_argument_order(args, parser)
    namespace = parser.parse_args(list(args))
    return list(namespace.inputs), namespace.depth


def _usage_text(parser: argparse.ArgumentParser) -> str:
    return parser.format_usage().rstrip("\n") + "\n" + _USAGE_NOTES


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if len(args) == 1 and args[0] in _HELP_FLAGS:
        parser.print_help()
        return 0

    try:
        inputs, depth = parse_arguments(args, parser)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 2

    options = IngestionOptions(max_depth=depth, enable_tables=MARKDOWN2JSON_ENABLE_TABLES)
    try:
        records = asyncio.run(ingest_paths(inputs, options=options))
    except Markdown2jsonError as exc:
        logger.debug("Indexing aborted", exc_info=True)
        print(exc, file=sys.stderr)
        return 1

    sys.stdout.write(render_records(records) + "\n")
    return 0
