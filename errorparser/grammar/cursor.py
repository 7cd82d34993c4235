"""Trivia-skipping cursor over one line's tokens."""

from dataclasses import dataclass

from errorparser.lexer import Token, TokenKind, eof_token


@dataclass(frozen=True, slots=True)
class CursorCheckpoint:
    index: int


class TokenCursor:
    """Read-only view of a token tuple that hides trivia from grammar rules.

    Every grammar attempt builds its own cursor, so rewinding or abandoning one
    never affects another attempt over the same tokens.
    """

    def __init__(self, tokens: tuple[Token, ...]) -> None:
        self._tokens = tokens
        self._index = 0
        self._skip_trivia()

    @property
    def current(self) -> Token:
        if self._index >= len(self._tokens):
            end = self._tokens[-1].range.end if self._tokens else 0
            return eof_token(end)
        return self._tokens[self._index]

    @property
    def kind(self) -> TokenKind:
        return self.current.kind

    @property
    def checkpoint(self) -> CursorCheckpoint:
        return CursorCheckpoint(self._index)

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._index = checkpoint.index

    def at(self, *kinds: TokenKind) -> bool:
        return self.kind in kinds

    def at_word(self, *texts: str) -> bool:
        return self.kind == TokenKind.WORD and self.current.text in texts

    def at_text(self, text: str) -> bool:
        return self.current.text == text

    def at_line_end(self) -> bool:
        """True when only NEWLINE/EOF remain (trivia already skipped)."""
        return self._is_line_end(self._index)

    def bump(self) -> Token:
        token = self.current
        if token.kind != TokenKind.EOF:
            self._index += 1
            self._skip_trivia()
        return token

    def eat(self, *kinds: TokenKind) -> Token | None:
        if self.at(*kinds):
            return self.bump()
        return None

    def eat_word(self, *texts: str) -> Token | None:
        if self.at_word(*texts):
            return self.bump()
        return None

    def eat_text(self, text: str) -> Token | None:
        if self.at_text(text):
            return self.bump()
        return None

    def rest_of_line(self) -> str:
        """Consume everything up to end of line; returns the raw text, stripped."""
        start = self._index
        while self._index < len(self._tokens) and self._tokens[self._index].kind not in (
            TokenKind.NEWLINE,
            TokenKind.EOF,
        ):
            self._index += 1
        text = "".join(token.text for token in self._tokens[start : self._index])
        self._skip_trivia()
        return text.strip()

    def remaining(self) -> tuple[Token, ...]:
        return self._tokens[self._index :]

    def _skip_trivia(self) -> None:
        # NEWLINE is trivia too, but it is kept visible at the end of the line
        # so grammars can anchor on it.
        while self._index < len(self._tokens):
            kind = self._tokens[self._index].kind
            if kind == TokenKind.WHITESPACE:
                self._index += 1
                continue
            if kind == TokenKind.NEWLINE and not self._is_line_end(self._index):
                self._index += 1
                continue
            break

    def _is_line_end(self, index: int) -> bool:
        return all(token.kind.is_trivia or token.kind == TokenKind.EOF for token in self._tokens[index:])
