"""Expression trees produced by the parser.

Nodes are immutable. `Arg` indices are resolved at parse time against the
parameter list of the declaration being parsed, so evaluation only needs the
flat frame of the current call.
"""

from __future__ import annotations

from dataclasses import dataclass

from polish import Value
from polish.types.symbol import Symbol


@dataclass(frozen=True, slots=True)
class App:
    callee: Symbol
    args: tuple[Expression, ...] = ()

    def __str__(self):
        if not self.args:
            return self.callee.name
        return f"{self.callee.name} " + " ".join(str(a) for a in self.args)


@dataclass(frozen=True, slots=True)
class Arg:
    index: int

    def __str__(self):
        return f"${self.index}"


@dataclass(frozen=True, slots=True)
class Literal:
    value: Value

    def __str__(self):
        if isinstance(self.value, str):
            return repr(self.value)
        return str(self.value)


class PlaceholderType:
    """Body of a function whose declaration is still being parsed."""

    __slots__ = ()

    def __repr__(self):
        return "Placeholder"


Placeholder = PlaceholderType()

Expression = App | Arg | Literal | PlaceholderType
