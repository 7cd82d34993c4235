"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from errorparser.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11

    # -------------------------
    # Generic words / literals
    # -------------------------
    INT = 20
    WORD = 21
    PATH = 22
    STRING = 23  # quoted string, closed on the same line

    # -------------------------
    # Format-specific markers
    # -------------------------
    PANIC_START = 30  # panic:
    FILE_START = 31  # File "
    ERROR_CODE = 32  # E0308
    ARROW = 33  # -->

    # -------------------------
    # Punctuation
    # -------------------------
    COLON = 40  # :
    COMMA = 41  # ,
    LBRACKET = 42  # [
    RBRACKET = 43  # ]

    OTHER = 50  # any other single character

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE)

    @property
    def is_marker(self) -> bool:
        return self in MARKER_KINDS


MARKER_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.PANIC_START,
        TokenKind.FILE_START,
        TokenKind.ERROR_CODE,
        TokenKind.ARROW,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    text: str
    range: TextRange

    @property
    def position(self) -> int:
        return self.range.start


def eof_token(offset: int) -> Token:
    return Token(TokenKind.EOF, "", TextRange.empty(offset))
