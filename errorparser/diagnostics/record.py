"""Unified per-line outputs handed to presentation layers."""

from dataclasses import dataclass
from typing import Final, TypeAlias

SEVERITY_ERROR: Final = "Error"
SEVERITY_PANIC: Final = "Panic"


@dataclass(frozen=True, slots=True)
class DiagnosticRecord:
    """Normalized diagnostic, independent of the toolchain that printed it."""

    severity: str
    message: str
    filename: str | None = None
    line: int | None = None
    column: int | None = None
    code: str | None = None


@dataclass(frozen=True, slots=True)
class ContextNotice:
    """A file reference held back until the next line; not a diagnostic yet."""

    filename: str
    line: int


@dataclass(frozen=True, slots=True)
class UnmatchedOutput:
    content: str


LineOutput: TypeAlias = DiagnosticRecord | ContextNotice | UnmatchedOutput
