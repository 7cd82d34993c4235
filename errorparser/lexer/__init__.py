"""Lexer."""

from errorparser.lexer.lexer import Lexer, dump_tokens, normalize_line, token_text, tokenize
from errorparser.lexer.tokens import MARKER_KINDS, Token, TokenKind, eof_token

__all__ = [
    "MARKER_KINDS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "eof_token",
    "normalize_line",
    "token_text",
    "tokenize",
]
