"""Line dispatch: source-format selection and grammar priority."""

from errorparser.dispatch.engine import (
    AUTO_ORDER,
    DispatchResult,
    Dispatcher,
    GrammarEntry,
    LineSupplier,
    grammars_for,
)
from errorparser.dispatch.options import DispatchOptions, SourceFormat

__all__ = [
    "AUTO_ORDER",
    "DispatchOptions",
    "DispatchResult",
    "Dispatcher",
    "GrammarEntry",
    "LineSupplier",
    "SourceFormat",
    "grammars_for",
]
