import pytest

from errorparser.lexer import Lexer, TokenKind, normalize_line, tokenize
from tests._debug import debug_dump_tokens
from tests._shared_cases import SCENARIO_CASES, LineCase, case_id


def kinds(line: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(line) if not token.kind.is_trivia and token.kind != TokenKind.EOF]


def texts(line: str) -> list[str]:
    return [token.text for token in tokenize(line) if not token.kind.is_trivia and token.kind != TokenKind.EOF]


def test_flutter_line_splits_path_from_line_and_column() -> None:
    line = "lib/main.dart:9:1: Error: Type 'oid' not found."
    tokens = tokenize(line)
    debug_dump_tokens("flutter_line", line, tokens)

    assert kinds(line)[:8] == [
        TokenKind.PATH,
        TokenKind.COLON,
        TokenKind.INT,
        TokenKind.COLON,
        TokenKind.INT,
        TokenKind.COLON,
        TokenKind.WORD,
        TokenKind.COLON,
    ]
    assert texts(line)[:7] == ["lib/main.dart", ":", "9", ":", "1", ":", "Error"]


def test_token_positions_cover_the_line_without_gaps() -> None:
    line = "  File \"gcd.py\", line 1, in <module>"
    tokens = tokenize(line)

    assert "".join(token.text for token in tokens) == line + "\n"
    assert tokens[0].position == 0
    for previous, current in zip(tokens, tokens[1:], strict=False):
        assert previous.range.end == current.position
    assert tokens[-1].kind == TokenKind.EOF


def test_panic_marker_wins_over_word_and_colon() -> None:
    assert kinds("panic: runtime error")[:2] == [TokenKind.PANIC_START, TokenKind.WORD]
    assert texts("panic: runtime error")[0] == "panic:"


def test_word_prefix_does_not_trigger_panic_marker() -> None:
    assert kinds("panicked: x")[:2] == [TokenKind.WORD, TokenKind.COLON]


def test_python_file_reference_tokens() -> None:
    assert kinds('File "gcd.py", line 1') == [
        TokenKind.FILE_START,
        TokenKind.PATH,
        TokenKind.OTHER,
        TokenKind.COMMA,
        TokenKind.WORD,
        TokenKind.INT,
    ]
    assert texts('File "gcd.py", line 1')[:3] == ['File "', "gcd.py", '"']


def test_rust_error_code_and_brackets_are_markers() -> None:
    assert kinds("error[E0308]: mismatched types") == [
        TokenKind.WORD,
        TokenKind.LBRACKET,
        TokenKind.ERROR_CODE,
        TokenKind.RBRACKET,
        TokenKind.COLON,
        TokenKind.WORD,
        TokenKind.WORD,
    ]


def test_error_code_requires_word_boundary() -> None:
    assert kinds("E0308x") == [TokenKind.WORD]
    assert kinds("E030") == [TokenKind.WORD]


def test_rust_location_line_tokens() -> None:
    tokens = tokenize(" --> src/main.rs:5:5")

    assert [token.kind for token in tokens] == [
        TokenKind.WHITESPACE,
        TokenKind.ARROW,
        TokenKind.WHITESPACE,
        TokenKind.PATH,
        TokenKind.COLON,
        TokenKind.INT,
        TokenKind.COLON,
        TokenKind.INT,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]


def test_windows_drive_path_is_one_token() -> None:
    assert texts(r"C:\proj\main.go:3:1: boom")[:3] == [r"C:\proj\main.go", ":", "3"]


def test_drive_prefix_needs_a_separator() -> None:
    assert kinds("a:1") == [TokenKind.WORD, TokenKind.COLON, TokenKind.INT]


def test_longest_match_decides_between_int_word_and_path() -> None:
    assert kinds("123") == [TokenKind.INT]
    assert kinds("abc") == [TokenKind.WORD]
    assert kinds("1.5") == [TokenKind.PATH]
    assert kinds("found.") == [TokenKind.PATH]
    assert kinds("./main.go") == [TokenKind.PATH]


def test_closed_quoted_string_is_single_token() -> None:
    assert kinds('"hello \\"world\\"" x') == [TokenKind.STRING, TokenKind.WORD]


def test_unclosed_quote_is_catch_all() -> None:
    assert kinds('"abc') == [TokenKind.OTHER, TokenKind.WORD]


def test_unknown_characters_become_single_character_tokens() -> None:
    tokens = [token for token in tokenize("^^^") if token.kind == TokenKind.OTHER]

    assert [token.text for token in tokens] == ["^", "^", "^"]


def test_newline_is_reappended_once() -> None:
    assert normalize_line("abc") == "abc\n"
    assert normalize_line("abc\n") == "abc\n"
    assert [token.kind for token in tokenize("")] == [TokenKind.NEWLINE, TokenKind.EOF]


def test_crlf_is_one_newline_token() -> None:
    tokens = Lexer("x\r\n").lex()

    assert [token.kind for token in tokens] == [TokenKind.WORD, TokenKind.NEWLINE, TokenKind.EOF]
    assert tokens[1].text == "\r\n"


def test_whitespace_runs_are_single_trivia_tokens() -> None:
    tokens = tokenize("a \t b")

    assert tokens[1].kind == TokenKind.WHITESPACE
    assert tokens[1].text == " \t "
    assert tokens[1].kind.is_trivia


@pytest.mark.parametrize("case", SCENARIO_CASES, ids=case_id)
def test_lexer_is_lossless_for_central_cases(case: LineCase) -> None:
    for line in case.lines:
        tokens = tokenize(line)
        debug_dump_tokens(f"lexer_case::{case.name}", line, tokens)

        assert "".join(token.text for token in tokens) == line + "\n"
