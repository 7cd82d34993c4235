"""Command-line entry point: read tool output, print normalized diagnostics."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from errorparser.diagnostics import DiagnosticRecord, LineOutput, is_error
from errorparser.dispatch import DispatchOptions
from errorparser.pipeline import LineProcessor
from errorparser.render import render_console, render_json

logger = logging.getLogger("errorparser")

LANG_ENV_VAR = "ERRORPARSER_LANG"
EXIT_OK = 0
EXIT_FAILURE = 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="errorparser",
        description="Normalize Flutter, Go, Python and Rust error output into uniform diagnostics.",
    )
    parser.add_argument(
        "--lang",
        default=os.environ.get(LANG_ENV_VAR, "auto"),
        help=f"Source format: auto, flutter, python, go or rust (default: ${LANG_ENV_VAR} or auto)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["console", "json"],
        default="console",
        help="Output style (default: console)",
    )
    parser.add_argument(
        "--fail-on-diagnostics",
        action="store_true",
        help="Exit with status 1 when any error-severity diagnostic was found",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for stderr output (default: WARNING)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files to read in order; standard input when omitted",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        options = DispatchOptions.from_name(args.lang)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info("Parsing for language: %s", options.source_format)

    found_error = False
    try:
        for lines in _iter_inputs(args.files, stdin):
            # Fresh processor per input so a file reference never spans files.
            processor = LineProcessor(options)
            for output in processor.process(lines):
                stdout.write(_render(output, args.output_format, options) + "\n")
                if isinstance(output, DiagnosticRecord) and is_error(output):
                    found_error = True
    except OSError as exc:
        logger.error("Error reading input: %s", exc)
        return EXIT_FAILURE

    if args.fail_on_diagnostics and found_error:
        return EXIT_FAILURE
    return EXIT_OK


def _iter_inputs(files: list[Path], stdin: TextIO) -> Iterable[Iterable[str]]:
    if not files:
        yield stdin
        return
    for path in files:
        with path.open("r", encoding="utf-8") as handle:
            yield handle


def _render(output: LineOutput, output_format: str, options: DispatchOptions) -> str:
    if output_format == "json":
        return render_json(output)
    return render_console(output, options.source_format)


if __name__ == "__main__":
    raise SystemExit(main())
