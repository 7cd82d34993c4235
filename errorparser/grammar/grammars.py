"""Line grammars.

Each grammar is a pure function over one line's tokens. It returns a
`GrammarMatch` when the whole line fits, or `None` without side effects; the
dispatch engine tries them in priority order.

Two multi-line strategies exist and are kept apart on purpose:

- inline continuation (`match_rust`): the grammar itself is handed the next
  physical line and may consume it within the same attempt;
- cross-call fragments (`match_python_file_ref`): the grammar returns after one
  line and the context carrier joins it with the next line's result.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from errorparser.grammar.cursor import TokenCursor
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
from errorparser.lexer import Token, TokenKind

FILENAME_KINDS: Final[tuple[TokenKind, ...]] = (TokenKind.PATH, TokenKind.WORD)
RUST_LEVELS: Final[tuple[str, ...]] = ("error", "warning")

Continuation = Callable[[], tuple[Token, ...] | None]


@dataclass(frozen=True, slots=True)
class GrammarMatch:
    node: ParsedNode
    consumed_continuation: bool = False


def match_flutter(tokens: tuple[Token, ...]) -> GrammarMatch | None:
    """path `:` int `:` int `:` word `:` rest"""
    cursor = TokenCursor(tokens)
    position = _parse_file_position(cursor)
    if position is None:
        return None
    filename, line, column = position

    if cursor.eat(TokenKind.COLON) is None:
        return None
    severity = cursor.eat(TokenKind.WORD)
    if severity is None or cursor.eat(TokenKind.COLON) is None:
        return None

    node = FlutterDiagnostic(
        filename=filename,
        line=line,
        column=column,
        severity=severity.text,
        message=cursor.rest_of_line(),
    )
    return _finish(node, cursor)


def match_go_compile(tokens: tuple[Token, ...]) -> GrammarMatch | None:
    """path `:` int `:` int `:` rest"""
    cursor = TokenCursor(tokens)
    position = _parse_file_position(cursor)
    if position is None or cursor.eat(TokenKind.COLON) is None:
        return None
    filename, line, column = position
    node = GoCompileDiagnostic(filename=filename, line=line, column=column, message=cursor.rest_of_line())
    return _finish(node, cursor)


def match_go_panic(tokens: tuple[Token, ...]) -> GrammarMatch | None:
    """`panic:` rest, with an optional trailing `path:int` stack frame."""
    cursor = TokenCursor(tokens)
    if cursor.eat(TokenKind.PANIC_START) is None:
        return None

    body = _line_body(cursor.remaining())
    frame = _split_stack_frame(body)
    cursor.rest_of_line()

    if frame is None:
        node = GoPanic(message=_join(body))
    else:
        frame_start, stack_file, stack_line = frame
        node = GoPanic(message=_join(body[:frame_start]), stack_file=stack_file, stack_line=stack_line)
    return _finish(node, cursor)


def match_python_file_ref(tokens: tuple[Token, ...]) -> GrammarMatch | None:
    """`File "` path `"` `,` `line` int [`,` `in` rest]"""
    cursor = TokenCursor(tokens)
    if cursor.eat(TokenKind.FILE_START) is None:
        return None
    filename = cursor.eat(*FILENAME_KINDS)
    if filename is None or cursor.eat_text('"') is None:
        return None
    if cursor.eat(TokenKind.COMMA) is None or cursor.eat_word("line") is None:
        return None
    line = cursor.eat(TokenKind.INT)
    if line is None:
        return None

    scope: str | None = None
    checkpoint = cursor.checkpoint
    if cursor.eat(TokenKind.COMMA) is not None and cursor.eat_word("in") is not None:
        scope = cursor.rest_of_line() or None
    else:
        cursor.rewind(checkpoint)

    return _finish(PythonFileRef(filename=filename.text, line=int(line.text), scope=scope), cursor)


def match_python_error(tokens: tuple[Token, ...]) -> GrammarMatch | None:
    """word `:` rest"""
    cursor = TokenCursor(tokens)
    error_type = cursor.eat(TokenKind.WORD)
    if error_type is None or cursor.eat(TokenKind.COLON) is None:
        return None
    return _finish(PythonErrorLine(error_type=error_type.text, message=cursor.rest_of_line()), cursor)


def match_rust(tokens: tuple[Token, ...], continuation: Continuation | None = None) -> GrammarMatch | None:
    """`error|warning` [`[` code `]`] `:` rest, then optionally the `-->` location line.

    `continuation` yields the tokens of the next physical line. It is only
    called once the message line itself has matched.
    """
    cursor = TokenCursor(tokens)
    level = cursor.eat_word(*RUST_LEVELS)
    if level is None:
        return None

    code: str | None = None
    checkpoint = cursor.checkpoint
    if cursor.eat(TokenKind.LBRACKET) is not None:
        code_token = cursor.eat(TokenKind.ERROR_CODE)
        if code_token is None or cursor.eat(TokenKind.RBRACKET) is None:
            cursor.rewind(checkpoint)
        else:
            code = code_token.text

    if cursor.eat(TokenKind.COLON) is None:
        return None
    message = cursor.rest_of_line()

    location: RustLocation | None = None
    if continuation is not None:
        next_tokens = continuation()
        if next_tokens is not None:
            location = match_rust_location(next_tokens)

    node = RustDiagnostic(level=level.text, message=message, code=code, location=location)
    return GrammarMatch(node=node, consumed_continuation=location is not None)


def match_rust_location(tokens: tuple[Token, ...]) -> RustLocation | None:
    """`-->` path `:` int `:` int"""
    cursor = TokenCursor(tokens)
    if cursor.eat(TokenKind.ARROW) is None:
        return None
    position = _parse_file_position(cursor)
    if position is None or not cursor.at_line_end():
        return None
    filename, line, column = position
    return RustLocation(filename=filename, line=line, column=column)


def match_unmatched(tokens: tuple[Token, ...]) -> GrammarMatch:
    """Always matches: the original line, verbatim."""
    content = "".join(token.text for token in tokens).removesuffix("\n")
    return GrammarMatch(node=UnmatchedLine(content=content))


def _parse_file_position(cursor: TokenCursor) -> tuple[str, int, int] | None:
    filename = cursor.eat(*FILENAME_KINDS)
    if filename is None or cursor.eat(TokenKind.COLON) is None:
        return None
    line = cursor.eat(TokenKind.INT)
    if line is None or cursor.eat(TokenKind.COLON) is None:
        return None
    column = cursor.eat(TokenKind.INT)
    if column is None:
        return None
    return filename.text, int(line.text), int(column.text)


def _finish(node: ParsedNode, cursor: TokenCursor) -> GrammarMatch | None:
    if not cursor.at_line_end():
        return None
    return GrammarMatch(node=node)


def _line_body(tokens: tuple[Token, ...]) -> list[Token]:
    body: list[Token] = []
    for token in tokens:
        if token.kind in (TokenKind.NEWLINE, TokenKind.EOF):
            break
        body.append(token)
    while body and body[-1].kind == TokenKind.WHITESPACE:
        body.pop()
    return body


def _split_stack_frame(body: list[Token]) -> tuple[int, str, int] | None:
    """Find `path:line` (optionally followed by `+0x..`) at the end of a panic line.

    Returns (index of the path token, path, line) or None.
    """
    end = len(body)
    # `main.go:9 +0x8d`
    if end >= 2 and body[end - 1].text.startswith("0x") and body[end - 2].text == "+":
        end -= 2
        while end and body[end - 1].kind == TokenKind.WHITESPACE:
            end -= 1

    if end < 3:
        return None
    path, colon, line = body[end - 3], body[end - 2], body[end - 1]
    if path.kind not in FILENAME_KINDS or colon.kind != TokenKind.COLON or line.kind != TokenKind.INT:
        return None
    if path.range.end != colon.range.start or colon.range.end != line.range.start:
        return None
    return end - 3, path.text, int(line.text)


def _join(tokens: list[Token]) -> str:
    return "".join(token.text for token in tokens).strip()
