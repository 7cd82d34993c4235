"""Per-stream processing: context carrier, normalizer and line driver."""

from errorparser.pipeline.context import ContextCarrier
from errorparser.pipeline.normalize import display_severity, normalize
from errorparser.pipeline.stream import LineOutcome, LineProcessor, parse_lines

__all__ = [
    "ContextCarrier",
    "LineOutcome",
    "LineProcessor",
    "display_severity",
    "normalize",
    "parse_lines",
]
