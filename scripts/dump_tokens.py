#!/usr/bin/env python
"""Print the tokens and the dispatch result for each given line (or stdin)."""

import argparse
import sys

from errorparser.dispatch import Dispatcher
from errorparser.lexer import Token, tokenize


def format_token(idx: int, token: Token) -> str:
    base = f"[{idx}] kind={token.kind.name} text={token.text!r} span=({token.range.start},{token.range.end})"
    if token.kind.is_trivia:
        return base + " trivia"
    if token.kind.is_marker:
        return base + " marker"
    return base


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens for tool output lines")
    parser.add_argument("lines", nargs="*", help="Lines to tokenize (default: read stdin)")
    parser.add_argument("--lang", default="auto", help="Source format used for the dispatch line")
    args = parser.parse_args()

    dispatcher = Dispatcher(args.lang)
    lines = args.lines or [line.rstrip("\n") for line in sys.stdin]
    for line in lines:
        print(f"line: {line!r}")
        for idx, token in enumerate(tokenize(line)):
            print("  " + format_token(idx, token))
        result = dispatcher.dispatch(line)
        print(f"  -> {result.grammar}: {result.node}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
