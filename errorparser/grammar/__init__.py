"""Per-format line grammars and the node types they produce."""

from errorparser.grammar.cursor import CursorCheckpoint, TokenCursor
from errorparser.grammar.grammars import (
    RUST_LEVELS,
    Continuation,
    GrammarMatch,
    match_flutter,
    match_go_compile,
    match_go_panic,
    match_python_error,
    match_python_file_ref,
    match_rust,
    match_rust_location,
    match_unmatched,
)
from errorparser.grammar.nodes import (
    FlutterDiagnostic,
    GoCompileDiagnostic,
    GoPanic,
    ParsedNode,
    PythonErrorLine,
    PythonFileRef,
    RustDiagnostic,
    RustLocation,
    UnmatchedLine,
)

__all__ = [
    "RUST_LEVELS",
    "Continuation",
    "CursorCheckpoint",
    "FlutterDiagnostic",
    "GoCompileDiagnostic",
    "GoPanic",
    "GrammarMatch",
    "ParsedNode",
    "PythonErrorLine",
    "PythonFileRef",
    "RustDiagnostic",
    "RustLocation",
    "TokenCursor",
    "UnmatchedLine",
    "match_flutter",
    "match_go_compile",
    "match_go_panic",
    "match_python_error",
    "match_python_file_ref",
    "match_rust",
    "match_rust_location",
    "match_unmatched",
]
