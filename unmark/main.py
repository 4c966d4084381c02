"""Command-line entry point.

Reads text from a file (or stdin), removes watermark characters and prints
the result as JSON:

    {"success": true, "original": ..., "cleaned": ..., "stats": {...}}

On failure prints {"success": false, "error": "..."} and exits with status 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from unmark.cleaning.factory import CleanerFactory
from unmark.config.settings import Settings
from unmark.logging.logger import Log
from unmark.processor.exceptions import InputReadError, ProcessorError
from unmark.processor.processor import build_processor
from unmark.processor.serializer import ResultSerializer


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unmark",
        description="Detect and remove invisible watermark characters from text.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to a text file (reads stdin when omitted or '-')",
    )
    parser.add_argument(
        "--cleaned-only",
        dest="cleaned_only",
        action="store_true",
        help="Print only the cleaned text instead of the JSON report",
    )
    parser.add_argument(
        "--policy",
        default=None,
        choices=sorted(CleanerFactory.POLICIES),
        help="Override BOUNDARY_POLICY for invisible characters between words",
    )
    return parser


def read_input(path: str | None, encoding: str) -> str:
    """Read input text from *path*, or from stdin when path is None or '-'.

    Raises:
        InputReadError: if the source cannot be read or decoded.
    """
    try:
        if path is None or path == "-":
            data = sys.stdin.buffer.read()
        else:
            data = Path(path).read_bytes()
    except OSError as exc:
        raise InputReadError(f"Failed to read input: {exc}") from exc
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise InputReadError(f"Failed to decode input as {encoding}: {exc}") from exc


def _emit(payload: dict[str, Any], indent: int | None) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=indent))


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> read input -> process -> print result."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    if args.policy is not None:
        settings.boundary_policy = args.policy

    try:
        processor = build_processor(settings)
        text = read_input(args.path, settings.input_encoding)
        result = processor.process(text)
    except (ProcessorError, ValueError) as exc:
        Log.error(f"Processing failed: {exc}")
        _emit({"success": False, "error": str(exc)}, settings.output_indent)
        return 1

    if args.cleaned_only:
        sys.stdout.write(result.cleaned)
        return 0

    _emit({"success": True, **ResultSerializer().serialize(result)}, settings.output_indent)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
