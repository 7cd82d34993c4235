import pytest

from errorparser.dispatch import AUTO_ORDER, DispatchOptions, Dispatcher, SourceFormat, grammars_for
from errorparser.grammar import (
    FlutterDiagnostic,
    GoCompileDiagnostic,
    PythonErrorLine,
    PythonFileRef,
    RustDiagnostic,
    UnmatchedLine,
)

FLUTTER_LINE = "lib/main.dart:9:1: Error: Type 'oid' not found."


def test_auto_order_matches_documented_priority() -> None:
    assert [entry.name for entry in AUTO_ORDER] == [
        "flutter",
        "go_compile",
        "go_panic",
        "python_file_ref",
        "python_error",
        "rust",
    ]
    assert [entry.name for entry in AUTO_ORDER if entry.inline_continuation] == ["rust"]


def test_fixed_formats_select_their_own_grammars() -> None:
    assert [entry.name for entry in grammars_for(SourceFormat.GO)] == ["go_compile", "go_panic"]
    assert [entry.name for entry in grammars_for(SourceFormat.PYTHON)] == ["python_file_ref", "python_error"]
    assert [entry.name for entry in grammars_for(SourceFormat.FLUTTER)] == ["flutter"]
    assert [entry.name for entry in grammars_for(SourceFormat.RUST)] == ["rust"]


def test_keyword_reservation_applies_only_to_auto_mode() -> None:
    auto_entry = next(entry for entry in AUTO_ORDER if entry.name == "python_error")
    python_entry = grammars_for(SourceFormat.PYTHON)[-1]

    assert auto_entry.reserved_words == ("error", "warning")
    assert python_entry.name == "python_error"
    assert python_entry.reserved_words == ()


def test_line_valid_for_flutter_and_go_resolves_to_flutter_in_auto_mode() -> None:
    result = Dispatcher().dispatch(FLUTTER_LINE)

    assert result.grammar == "flutter"
    assert isinstance(result.node, FlutterDiagnostic)


def test_same_line_in_go_mode_is_a_compile_error() -> None:
    result = Dispatcher(SourceFormat.GO).dispatch(FLUTTER_LINE)

    assert result.node == GoCompileDiagnostic(
        filename="lib/main.dart",
        line=9,
        column=1,
        message="Error: Type 'oid' not found.",
    )


def test_fixed_mode_falls_back_to_unmatched() -> None:
    result = Dispatcher(SourceFormat.FLUTTER).dispatch("SyntaxError: invalid syntax")

    assert result.grammar == "unmatched"
    assert result.node == UnmatchedLine(content="SyntaxError: invalid syntax")


def test_auto_mode_routes_lowercase_keywords_to_rust() -> None:
    result = Dispatcher().dispatch("warning: unused variable: `x`")

    assert isinstance(result.node, RustDiagnostic)
    assert result.node.level == "warning"


def test_auto_mode_python_lines() -> None:
    dispatcher = Dispatcher()

    assert isinstance(dispatcher.dispatch('File "gcd.py", line 1').node, PythonFileRef)
    assert isinstance(dispatcher.dispatch("SyntaxError: invalid syntax").node, PythonErrorLine)


def test_python_mode_reads_lowercase_keywords_as_error_lines() -> None:
    result = Dispatcher(SourceFormat.PYTHON).dispatch("error: something went wrong")

    assert result.grammar == "python_error"
    assert result.node == PythonErrorLine(error_type="error", message="something went wrong")


@pytest.mark.parametrize("name", ["cobol", "", "rustc"])
def test_invalid_selector_fails_on_construction(name: str) -> None:
    with pytest.raises(ValueError, match="Unknown source format"):
        Dispatcher(name)


def test_selector_is_case_insensitive() -> None:
    assert Dispatcher("Python").options.source_format == SourceFormat.PYTHON
    assert DispatchOptions.from_name(" GO ").source_format == SourceFormat.GO


def test_options_reject_raw_strings() -> None:
    with pytest.raises(ValueError, match="must be a SourceFormat"):
        DispatchOptions(source_format="go")  # type: ignore[arg-type]


def test_dispatch_is_deterministic() -> None:
    dispatcher = Dispatcher()
    for line in (FLUTTER_LINE, "panic: boom", "error[E0308]: mismatched types", "anything else"):
        assert dispatcher.dispatch(line) == dispatcher.dispatch(line)


@pytest.mark.parametrize(
    "line",
    ["", " ", "\t\t", "\x00\x01", "ümlaut ☃ ok", ":::", '"', "-->", "[E0308]", "File \""],
)
def test_dispatch_always_classifies(line: str) -> None:
    for source_format in SourceFormat:
        result = Dispatcher(source_format).dispatch(line)
        assert result.node is not None
        if isinstance(result.node, UnmatchedLine):
            assert result.node.content == line


def test_next_line_is_pulled_only_for_inline_continuation() -> None:
    pulled: list[str] = []

    def next_line() -> str | None:
        pulled.append(" --> src/main.rs:5:5")
        return " --> src/main.rs:5:5"

    dispatcher = Dispatcher()
    dispatcher.dispatch(FLUTTER_LINE, next_line=next_line)
    dispatcher.dispatch("SyntaxError: invalid syntax", next_line=next_line)
    assert pulled == []

    result = dispatcher.dispatch("error[E0308]: mismatched types", next_line=next_line)
    assert result.consumed_continuation is True
    assert pulled == [" --> src/main.rs:5:5"]
