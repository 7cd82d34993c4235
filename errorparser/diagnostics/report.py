"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from errorparser.diagnostics.record import DiagnosticRecord, LineOutput

NON_ERROR_SEVERITIES: frozenset[str] = frozenset({"Info", "Note", "Hint", "Context"})


def collect_records(outputs: Iterable[LineOutput]) -> list[DiagnosticRecord]:
    return [output for output in outputs if isinstance(output, DiagnosticRecord)]


def is_error(record: DiagnosticRecord) -> bool:
    # Exception names (`SyntaxError`, `KeyError`) count as errors; `Warning`,
    # `UserWarning` and friends do not.
    if record.severity.endswith("Warning"):
        return False
    return record.severity not in NON_ERROR_SEVERITIES


def has_errors(outputs: Iterable[LineOutput]) -> bool:
    return any(is_error(record) for record in collect_records(outputs))
