"""Dispatch engine: tokenize once, try grammars in priority order, fall back to Unmatched."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Final

from errorparser.dispatch.options import DispatchOptions, SourceFormat
from errorparser.grammar import (
    RUST_LEVELS,
    Continuation,
    GrammarMatch,
    ParsedNode,
    TokenCursor,
    match_flutter,
    match_go_compile,
    match_go_panic,
    match_python_error,
    match_python_file_ref,
    match_rust,
    match_unmatched,
)
from errorparser.lexer import Token, tokenize

logger = logging.getLogger(__name__)

LineSupplier = Callable[[], str | None]


@dataclass(frozen=True, slots=True)
class GrammarEntry:
    """One grammar in the dispatch table.

    `reserved_words` are leading words the entry declines so that a later
    entry can claim them; fixed formats clear them.
    """

    name: str
    source_format: SourceFormat
    match: Callable[..., GrammarMatch | None]
    inline_continuation: bool = False
    reserved_words: tuple[str, ...] = ()

    def attempt(self, tokens: tuple[Token, ...], continuation: Continuation | None) -> GrammarMatch | None:
        if self.reserved_words and TokenCursor(tokens).at_word(*self.reserved_words):
            return None
        if self.inline_continuation:
            return self.match(tokens, continuation)
        return self.match(tokens)


# Auto-detect priority order. A new grammar must be disjoint from every entry
# above it on well-formed input, or be placed below the entries it overlaps.
AUTO_ORDER: Final[tuple[GrammarEntry, ...]] = (
    GrammarEntry("flutter", SourceFormat.FLUTTER, match_flutter),
    GrammarEntry("go_compile", SourceFormat.GO, match_go_compile),
    GrammarEntry("go_panic", SourceFormat.GO, match_go_panic),
    GrammarEntry("python_file_ref", SourceFormat.PYTHON, match_python_file_ref),
    GrammarEntry("python_error", SourceFormat.PYTHON, match_python_error, reserved_words=RUST_LEVELS),
    GrammarEntry("rust", SourceFormat.RUST, match_rust, inline_continuation=True),
)


def grammars_for(source_format: SourceFormat) -> tuple[GrammarEntry, ...]:
    if source_format == SourceFormat.AUTO:
        return AUTO_ORDER
    return tuple(
        replace(entry, reserved_words=())
        for entry in AUTO_ORDER
        if entry.source_format == source_format
    )


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Classification of one line (plus, for inline continuations, the line after it)."""

    node: ParsedNode
    grammar: str
    consumed_continuation: bool = False


class Dispatcher:
    """Classifies lines for one selected source format.

    The selector is validated here, so a bad format fails before any input is read.
    """

    def __init__(self, options: DispatchOptions | SourceFormat | str = SourceFormat.AUTO) -> None:
        if not isinstance(options, DispatchOptions):
            options = DispatchOptions.from_name(options)
        self._options = options
        self._grammars = grammars_for(options.source_format)

    @property
    def options(self) -> DispatchOptions:
        return self._options

    @property
    def grammars(self) -> tuple[GrammarEntry, ...]:
        return self._grammars

    def dispatch(self, line: str, *, next_line: LineSupplier | None = None) -> DispatchResult:
        """Classify `line`.

        `next_line` supplies the following physical line on demand; only inline
        continuation grammars call it, at most once.
        """
        tokens = tokenize(line)
        continuation = _lazy_continuation(next_line) if next_line is not None else None

        for entry in self._grammars:
            matched = entry.attempt(tokens, continuation)
            if matched is None:
                continue
            logger.debug("Line matched %s grammar: %r", entry.name, line)
            return DispatchResult(
                node=matched.node,
                grammar=entry.name,
                consumed_continuation=matched.consumed_continuation,
            )

        logger.debug("No %s grammar matched: %r", self._options.source_format, line)
        return DispatchResult(node=match_unmatched(tokens).node, grammar="unmatched")


def _lazy_continuation(next_line: LineSupplier) -> Continuation:
    cache: list[tuple[Token, ...] | None] = []

    def continuation() -> tuple[Token, ...] | None:
        if not cache:
            raw = next_line()
            cache.append(tokenize(raw) if raw is not None else None)
        return cache[0]

    return continuation
