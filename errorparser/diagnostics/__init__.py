"""Diagnostics."""

from errorparser.diagnostics.record import (
    SEVERITY_ERROR,
    SEVERITY_PANIC,
    ContextNotice,
    DiagnosticRecord,
    LineOutput,
    UnmatchedOutput,
)
from errorparser.diagnostics.report import collect_records, has_errors, is_error

__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_PANIC",
    "ContextNotice",
    "DiagnosticRecord",
    "LineOutput",
    "UnmatchedOutput",
    "collect_records",
    "has_errors",
    "is_error",
]
