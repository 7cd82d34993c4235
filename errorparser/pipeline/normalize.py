"""Map grammar nodes onto the unified diagnostic record."""

from __future__ import annotations

from typing import assert_never

from errorparser.diagnostics import SEVERITY_ERROR, SEVERITY_PANIC, DiagnosticRecord
from errorparser.grammar import (
    FlutterDiagnostic,
    GoCompileDiagnostic,
    GoPanic,
    ParsedNode,
    PythonErrorLine,
    PythonFileRef,
    RustDiagnostic,
    UnmatchedLine,
)


def display_severity(keyword: str) -> str:
    """`error` -> `Error`; only the first letter changes, so `SyntaxError` stays as is."""
    return keyword[:1].upper() + keyword[1:]


def normalize(node: ParsedNode, context: PythonFileRef | None = None) -> DiagnosticRecord:
    """Build the unified record for a complete diagnostic node.

    `context` is the file reference carried from the previous line; only
    Python error lines use it. Fragments that are not diagnostics by
    themselves raise TypeError.
    """
    match node:
        case FlutterDiagnostic():
            return DiagnosticRecord(
                severity=display_severity(node.severity),
                message=node.message,
                filename=node.filename,
                line=node.line,
                column=node.column,
            )
        case GoCompileDiagnostic():
            return DiagnosticRecord(
                severity=SEVERITY_ERROR,
                message=node.message,
                filename=node.filename,
                line=node.line,
                column=node.column,
            )
        case GoPanic():
            return DiagnosticRecord(
                severity=SEVERITY_PANIC,
                message=node.message,
                filename=node.stack_file,
                line=node.stack_line,
            )
        case PythonErrorLine():
            return DiagnosticRecord(
                severity=display_severity(node.error_type),
                message=node.message,
                filename=context.filename if context is not None else None,
                line=context.line if context is not None else None,
            )
        case RustDiagnostic():
            message = f"[{node.code}] {node.message}" if node.code is not None else node.message
            location = node.location
            return DiagnosticRecord(
                severity=display_severity(node.level),
                message=message,
                filename=location.filename if location is not None else None,
                line=location.line if location is not None else None,
                column=location.column if location is not None else None,
                code=node.code,
            )
        case PythonFileRef() | UnmatchedLine():
            raise TypeError(f"{type(node).__name__} has no diagnostic record form")
        case _:
            assert_never(node)
