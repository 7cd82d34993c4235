"""Console and JSON-lines rendering of line outputs."""

from __future__ import annotations

import json
from typing import Any, assert_never

from errorparser.diagnostics import ContextNotice, DiagnosticRecord, LineOutput, UnmatchedOutput
from errorparser.dispatch import SourceFormat


def format_location(record: DiagnosticRecord) -> str:
    """`file:line:col`, dropping whatever parts are unknown."""
    parts = [
        str(part)
        for part in (record.filename, record.line, record.column)
        if part is not None
    ]
    return ":".join(parts)


def render_console(output: LineOutput, source_format: SourceFormat = SourceFormat.AUTO) -> str:
    match output:
        case DiagnosticRecord():
            location = format_location(output)
            prefix = f"{location}: " if location else ""
            label = "" if source_format == SourceFormat.AUTO else f" ({source_format.display_name})"
            return f"Parsed Error{label}: {prefix}{output.severity}: {output.message}"
        case ContextNotice():
            return f"Context (Python File): {output.filename}, Line {output.line}"
        case UnmatchedOutput():
            return f"Unmatched Line: {output.content}"
        case _:
            assert_never(output)


def to_json_dict(output: LineOutput) -> dict[str, Any]:
    match output:
        case DiagnosticRecord():
            return {
                "kind": "diagnostic",
                "filename": output.filename,
                "line": output.line,
                "column": output.column,
                "severity": output.severity,
                "message": output.message,
                "code": output.code,
            }
        case ContextNotice():
            return {"kind": "context", "filename": output.filename, "line": output.line}
        case UnmatchedOutput():
            return {"kind": "unmatched", "content": output.content}
        case _:
            assert_never(output)


def render_json(output: LineOutput) -> str:
    return json.dumps(to_json_dict(output), ensure_ascii=False)
