"""Normalize toolchain error output (Flutter, Go, Python, Rust) into uniform diagnostic records."""

from errorparser.diagnostics import ContextNotice, DiagnosticRecord, LineOutput, UnmatchedOutput
from errorparser.dispatch import DispatchOptions, Dispatcher, SourceFormat
from errorparser.pipeline import ContextCarrier, LineProcessor, normalize, parse_lines

__all__ = [
    "ContextCarrier",
    "ContextNotice",
    "DiagnosticRecord",
    "DispatchOptions",
    "Dispatcher",
    "LineOutput",
    "LineProcessor",
    "SourceFormat",
    "UnmatchedOutput",
    "normalize",
    "parse_lines",
]
