"""Line-at-a-time driver: dispatch, context and normalization for one input stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from errorparser.diagnostics import LineOutput
from errorparser.dispatch import Dispatcher, DispatchOptions, LineSupplier, SourceFormat
from errorparser.pipeline.context import ContextCarrier

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LineOutcome:
    output: LineOutput
    grammar: str
    consumed_next: bool = False


class LineProcessor:
    """Owns the dispatcher and the context carrier for a single stream."""

    def __init__(self, options: DispatchOptions | SourceFormat | str = SourceFormat.AUTO) -> None:
        self._dispatcher = Dispatcher(options)
        self._carrier = ContextCarrier()

    @property
    def options(self) -> DispatchOptions:
        return self._dispatcher.options

    @property
    def carrier(self) -> ContextCarrier:
        return self._carrier

    def process_line(self, line: str, *, next_line: LineSupplier | None = None) -> LineOutcome:
        result = self._dispatcher.dispatch(line, next_line=next_line)
        output = self._carrier.resolve(result.node)
        return LineOutcome(output=output, grammar=result.grammar, consumed_next=result.consumed_continuation)

    def process(self, lines: Iterable[str]) -> Iterator[LineOutput]:
        """Yield one output per line; a consumed continuation line yields nothing of its own."""
        reader = _LineReader(lines)
        skip_blank = self.options.skip_blank_lines
        while True:
            line = reader.next()
            if line is None:
                break
            if skip_blank and line == "":
                self._carrier.expire()
                continue

            outcome = self.process_line(line, next_line=reader.peek)
            if outcome.consumed_next:
                logger.debug("Consumed continuation line %r", reader.next())
            yield outcome.output


class _LineReader:
    """Iterator with one line of lookahead; strips a single trailing newline."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._buffered: list[str] = []

    def peek(self) -> str | None:
        if not self._buffered:
            line = self._read()
            if line is None:
                return None
            self._buffered.append(line)
        return self._buffered[0]

    def next(self) -> str | None:
        if self._buffered:
            return self._buffered.pop()
        return self._read()

    def _read(self) -> str | None:
        line = next(self._lines, None)
        if line is None:
            return None
        return line.removesuffix("\n").removesuffix("\r")


def parse_lines(
    lines: Iterable[str],
    source_format: DispatchOptions | SourceFormat | str = SourceFormat.AUTO,
) -> list[LineOutput]:
    """Classify a whole sequence of lines with a fresh processor."""
    return list(LineProcessor(source_format).process(lines))
