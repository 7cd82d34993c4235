import json

from errorparser.diagnostics import ContextNotice, DiagnosticRecord, UnmatchedOutput
from errorparser.dispatch import SourceFormat
from errorparser.render import format_location, render_console, render_json

FLUTTER_RECORD = DiagnosticRecord(
    severity="Error",
    message="Type 'oid' not found.",
    filename="lib/main.dart",
    line=9,
    column=1,
)


def test_format_location_drops_unknown_parts() -> None:
    assert format_location(FLUTTER_RECORD) == "lib/main.dart:9:1"
    assert format_location(DiagnosticRecord(severity="Panic", message="boom", filename="main.go", line=3)) == (
        "main.go:3"
    )
    assert format_location(DiagnosticRecord(severity="Panic", message="boom")) == ""


def test_console_diagnostic() -> None:
    assert render_console(FLUTTER_RECORD) == "Parsed Error: lib/main.dart:9:1: Error: Type 'oid' not found."
    assert render_console(FLUTTER_RECORD, SourceFormat.FLUTTER) == (
        "Parsed Error (Flutter): lib/main.dart:9:1: Error: Type 'oid' not found."
    )


def test_console_diagnostic_without_location() -> None:
    record = DiagnosticRecord(severity="ModuleNotFoundError", message="No module named 'foowe'")

    assert render_console(record) == "Parsed Error: ModuleNotFoundError: No module named 'foowe'"


def test_console_context_and_unmatched() -> None:
    assert render_console(ContextNotice(filename="gcd.py", line=1)) == "Context (Python File): gcd.py, Line 1"
    assert render_console(UnmatchedOutput(content="  |")) == "Unmatched Line:   |"


def test_json_lines() -> None:
    record = DiagnosticRecord(severity="Error", message="[E0308] mismatched types", code="E0308")

    assert json.loads(render_json(record)) == {
        "kind": "diagnostic",
        "filename": None,
        "line": None,
        "column": None,
        "severity": "Error",
        "message": "[E0308] mismatched types",
        "code": "E0308",
    }
    assert json.loads(render_json(ContextNotice(filename="gcd.py", line=1))) == {
        "kind": "context",
        "filename": "gcd.py",
        "line": 1,
    }
    assert render_json(UnmatchedOutput(content="ümlaut")) == '{"kind": "unmatched", "content": "ümlaut"}'
