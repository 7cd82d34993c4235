"""Parsed-node variants, one per recognised line shape."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class FlutterDiagnostic:
    """`lib/main.dart:9:1: Error: Type 'oid' not found.`"""

    filename: str
    line: int
    column: int
    severity: str
    message: str


@dataclass(frozen=True, slots=True)
class GoCompileDiagnostic:
    """`./main.go:4:2: undefined: fmt`"""

    filename: str
    line: int
    column: int
    message: str


@dataclass(frozen=True, slots=True)
class GoPanic:
    """`panic: runtime error: integer divide by zero`, optionally ending in `file.go:9`."""

    message: str
    stack_file: str | None = None
    stack_line: int | None = None


@dataclass(frozen=True, slots=True)
class PythonFileRef:
    """`File "gcd.py", line 1` - never a complete diagnostic on its own."""

    filename: str
    line: int
    scope: str | None = None


@dataclass(frozen=True, slots=True)
class PythonErrorLine:
    """`SyntaxError: invalid syntax` - location comes from a preceding file reference."""

    error_type: str
    message: str


@dataclass(frozen=True, slots=True)
class RustLocation:
    filename: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class RustDiagnostic:
    """`error[E0308]: mismatched types`, with the ` --> src/main.rs:5:5` line when it follows."""

    level: str
    message: str
    code: str | None = None
    location: RustLocation | None = None


@dataclass(frozen=True, slots=True)
class UnmatchedLine:
    content: str


ParsedNode: TypeAlias = (
    FlutterDiagnostic
    | GoCompileDiagnostic
    | GoPanic
    | PythonFileRef
    | PythonErrorLine
    | RustDiagnostic
    | UnmatchedLine
)
