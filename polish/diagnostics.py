"""Rendering of Polish errors for humans.

The core only raises errors carrying a message and an optional Span. This
module turns them into compiler-style diagnostics:

    error: cannot find function or local bar
     --> prog.pn:2:9
    2 | \\foo -> bar
      |         ^^^
"""

from __future__ import annotations

import sys
from typing import TextIO

from termcolor import colored

from polish.errors import PolishError, PolishInternalError
from polish.types.span import Span

ERROR = "red"
GUTTER = "blue"


def _paint(text: str, color: str, enabled: bool) -> str:
    return colored(text, color, attrs=["bold"]) if enabled else text


def line_and_column(source: str, offset: int) -> tuple[int, int]:
    """0-based (line, column) of `offset` in `source`."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset)
    last_nl = source.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def format_diagnostic(
    error: PolishError,
    source: str | None = None,
    origin: str | None = None,
    color: bool = True,
) -> str:
    source = source if source is not None else error.source
    origin = origin if origin is not None else error.origin

    label = "internal error" if isinstance(error, PolishInternalError) else "error"
    lines = [f"{_paint(label, ERROR, color)}: {error.message}"]

    span: Span | None = error.span
    if span is None or source is None:
        return "\n".join(lines)

    line_num, col = line_and_column(source, span.start)
    source_lines = source.split("\n")
    text = source_lines[line_num] if line_num < len(source_lines) else ""
    # Carets stop at the end of the first line of a multi-line span
    width = max(1, min(len(span), len(text) - col))

    number = str(line_num + 1)
    pad = " " * len(number)
    lines.append(f"{pad}{_paint('-->', GUTTER, color)} {origin or '<input>'}:{line_num + 1}:{col + 1}")
    lines.append(f"{_paint(number + ' |', GUTTER, color)} {text}")
    lines.append(f"{pad} {_paint('|', GUTTER, color)} {' ' * col}{_paint('^' * width, ERROR, color)}")
    return "\n".join(lines)


def print_diagnostic(
    error: PolishError,
    source: str | None = None,
    origin: str | None = None,
    file: TextIO | None = None,
) -> None:
    stream = file if file is not None else sys.stderr
    color = hasattr(stream, "isatty") and stream.isatty()
    print(format_diagnostic(error, source, origin, color=color), file=stream)
