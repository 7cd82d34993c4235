"""Single-slot context carried from one line to the next."""

from __future__ import annotations

import logging

from errorparser.diagnostics import ContextNotice, LineOutput, UnmatchedOutput
from errorparser.grammar import ParsedNode, PythonErrorLine, PythonFileRef, UnmatchedLine
from errorparser.pipeline.normalize import normalize

logger = logging.getLogger(__name__)


class ContextCarrier:
    """Holds at most one Python file reference for exactly one following line.

    Whatever the next line turns out to be, the reference is taken out of the
    slot first, so it can complete at most one error line and never one that
    is two or more lines away. Use one carrier per input stream.
    """

    def __init__(self) -> None:
        self._pending: PythonFileRef | None = None

    @property
    def pending(self) -> PythonFileRef | None:
        return self._pending

    def take(self) -> PythonFileRef | None:
        current = self._pending
        self._pending = None
        return current

    def resolve(self, node: ParsedNode) -> LineOutput:
        """Turn this line's node into its output, consuming or expiring the pending reference."""
        current = self.take()

        match node:
            case PythonFileRef():
                self._discard(current)
                self._pending = node
                return ContextNotice(filename=node.filename, line=node.line)
            case PythonErrorLine():
                return normalize(node, context=current)
            case UnmatchedLine():
                self._discard(current)
                return UnmatchedOutput(content=node.content)
            case _:
                self._discard(current)
                return normalize(node)

    def expire(self) -> None:
        """Count a line that produced no node (e.g. a skipped blank line)."""
        self._discard(self.take())

    def reset(self) -> None:
        self._pending = None

    @staticmethod
    def _discard(current: PythonFileRef | None) -> None:
        if current is not None:
            logger.debug("Dropping unused file reference %s:%d", current.filename, current.line)
