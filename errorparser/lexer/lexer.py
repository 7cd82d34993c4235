"""Lexer."""

import re
from typing import Final

from errorparser.lexer.tokens import Token, TokenKind, eof_token
from errorparser.text import TextRange, slice_text_range

_INT_RE: Final = re.compile(r"\d+")
_WORD_RE: Final = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# Optional drive prefix, then one or more segments each optionally led by a separator.
# No ':' after the drive prefix, so `file.dart:9` stops before the line number.
_PATH_RE: Final = re.compile(r"(?:[A-Za-z]:(?=[\\/]))?(?:[\\/]?[\w.\-]+)+")
_STRING_RE: Final = re.compile(r'"(?:\\.|[^"\\\r\n])*"')
_ERROR_CODE_RE: Final = re.compile(r"E\d{4}(?![A-Za-z0-9_])")

_LITERAL_MARKERS: Final[tuple[tuple[str, TokenKind], ...]] = (
    ('File "', TokenKind.FILE_START),
    ("panic:", TokenKind.PANIC_START),
    ("-->", TokenKind.ARROW),
    ("[", TokenKind.LBRACKET),
    ("]", TokenKind.RBRACKET),
)

# Ties between equally long generic matches prefer the more specific kind.
_GENERIC_PATTERNS: Final[tuple[tuple[re.Pattern[str], TokenKind], ...]] = (
    (_INT_RE, TokenKind.INT),
    (_WORD_RE, TokenKind.WORD),
    (_PATH_RE, TokenKind.PATH),
)


class Lexer:
    """Lossless single-line lexer; every character ends up in exactly one token."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def next_token(self) -> Token:
        self._current_start = self._position

        if self.is_eof:
            return eof_token(self._position)

        kind = self._lex_token()
        current_range = TextRange(self._current_start, self._position)
        return Token(kind, slice_text_range(self._source, current_range), current_range)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\r" or ch == "\n" or ch == "\t" or ch == " ":
            return self._consume_newline_or_whitespaces()

        marker = self._lex_marker()
        if marker is not None:
            return marker

        if ch == '"':
            string = _STRING_RE.match(self._source, self._position)
            if string is not None:
                self._advance(string.end() - self._position)
                return TokenKind.STRING

        generic = self._lex_generic()
        if generic is not None:
            return generic

        if ch == ":":
            self._advance(1)
            return TokenKind.COLON
        if ch == ",":
            self._advance(1)
            return TokenKind.COMMA

        self._advance(1)
        return TokenKind.OTHER

    def _lex_marker(self) -> TokenKind | None:
        for literal, kind in _LITERAL_MARKERS:
            if self._source.startswith(literal, self._position):
                self._advance(len(literal))
                return kind

        code = _ERROR_CODE_RE.match(self._source, self._position)
        if code is not None:
            self._advance(code.end() - self._position)
            return TokenKind.ERROR_CODE
        return None

    def _lex_generic(self) -> TokenKind | None:
        best_kind: TokenKind | None = None
        best_end = self._position
        for pattern, kind in _GENERIC_PATTERNS:
            matched = pattern.match(self._source, self._position)
            if matched is not None and matched.end() > best_end:
                best_kind, best_end = kind, matched.end()

        if best_kind is not None:
            self._advance(best_end - self._position)
        return best_kind

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def normalize_line(line: str) -> str:
    """Ensure exactly one trailing newline so end-of-line anchors always see NEWLINE."""
    if line.endswith("\n"):
        return line
    return line + "\n"


def tokenize(line: str) -> tuple[Token, ...]:
    """Tokenize one line (newline re-appended when missing)."""
    return tuple(Lexer(normalize_line(line)).lex())


def token_text(token: Token, null_char_on_eof: bool = False) -> str:
    """Get the text of a token."""
    if token.kind == TokenKind.EOF:
        return "\0" if null_char_on_eof else ""
    return token.text


def dump_tokens(tokens: list[Token] | tuple[Token, ...]) -> None:
    """Print token list with kind, range and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} text={tok.text!r}")
