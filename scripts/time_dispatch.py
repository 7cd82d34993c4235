#!/usr/bin/env python3
"""Quick perf benchmark for line dispatch throughput."""

from __future__ import annotations

import argparse
import statistics
import time
from pathlib import Path

from tqdm import tqdm

from errorparser.diagnostics import DiagnosticRecord
from errorparser.pipeline import LineProcessor

SAMPLE_LINES: tuple[str, ...] = (
    "lib/main.dart:9:1: Error: Type 'oid' not found.",
    "./main.go:4:2: undefined: fmt",
    "panic: runtime error: integer divide by zero",
    '  File "/home/dev/project/gcd.py", line 1, in <module>',
    "SyntaxError: invalid syntax",
    "error[E0308]: mismatched types",
    " --> src/main.rs:5:5",
    "  |     ^^^^^^^^^^^ expected `i32`, found `&str`",
)


def _load_lines(path: Path | None, repeat: int) -> list[str]:
    if path is None:
        return list(SAMPLE_LINES) * repeat
    return path.read_text(encoding="utf-8").splitlines() * repeat


def _run_once(lines: list[str], *, lang: str, label: str, show_progress: bool) -> tuple[float, int, int]:
    start = time.perf_counter()
    iterator = tqdm(lines, desc=label, unit="line") if show_progress else lines
    outputs = list(LineProcessor(lang).process(iterator))
    duration = time.perf_counter() - start
    records = sum(1 for output in outputs if isinstance(output, DiagnosticRecord))
    return duration, len(outputs), records


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark line dispatch throughput")
    parser.add_argument("--input", type=Path, default=None, help="Log file to replay (default: built-in sample)")
    parser.add_argument("--lang", default="auto", help="Source format (default: auto)")
    parser.add_argument("--repeat", type=int, default=10_000, help="How many times to repeat the input")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    if args.input is not None and not args.input.is_file():
        raise SystemExit(f"Invalid --input: {args.input}")

    lines = _load_lines(args.input, max(args.repeat, 1))
    show_progress = not args.no_progress

    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(lines, lang=args.lang, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

    timings: list[float] = []
    outputs_count = 0
    records_count = 0
    for run_idx in range(max(args.runs, 1)):
        duration, outputs_count, records_count = _run_once(
            lines,
            lang=args.lang,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"lines={len(lines)} outputs={outputs_count} records={records_count}")
    print(f"mean={mean:.4f}s median={statistics.median(timings):.4f}s lines/s={len(lines) / mean:,.0f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
