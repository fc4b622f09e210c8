"""Symbol table for Polish.

The Environment owns the SymbolTable that interns function names and maps
each Symbol to its Function record. It is the single source of truth for
"does this name exist, and with what arity". The parser is the only writer;
the evaluator treats it as read-only.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from polish.errors import PolishInternalError
from polish.types.function import Function, FunctionBody
from polish.types.symbol import Symbol, SymbolTable


class Environment:
    """Mapping from interned Symbols to Function records."""

    __slots__ = ("symbols", "functions")

    def __init__(self):
        self.symbols = SymbolTable()
        self.functions: dict[Symbol, Function] = {}

    def intern(self, name: str) -> Symbol:
        """Return the Symbol for `name`, creating it on first use."""
        return self.symbols.intern(name)

    def declare(self, name: str | Symbol, arity: int, body: FunctionBody) -> Symbol:
        """Register or overwrite the Function for `name` (last write wins)."""
        sym = name if isinstance(name, Symbol) else self.intern(name)
        self.functions[sym] = Function(arity, body)
        return sym

    def resolve(self, key: str | Symbol) -> Optional[tuple[Symbol, Function]]:
        """Look up by name (interning on demand) or by a pre-resolved Symbol."""
        sym = key if isinstance(key, Symbol) else self.intern(key)
        func = self.functions.get(sym)
        if func is None:
            return None
        return sym, func

    def lookup(self, sym: Symbol) -> Function:
        """Fast path used by the evaluator; parsing guarantees `sym` exists."""
        try:
            return self.functions[sym]
        except KeyError:
            raise PolishInternalError(f"function {sym} vanished after parsing") from None

    def size(self) -> int:
        return len(self.functions)

    def items(self) -> Iterator[tuple[Symbol, Function]]:
        return iter(self.functions.items())

    @contextmanager
    def transaction(self):
        """Restore the function table if the block raises.

        Interned symbols are kept; a Symbol without a Function is harmless.
        """
        saved = dict(self.functions)
        try:
            yield self
        except BaseException:
            self.functions = saved
            raise

    def __contains__(self, name: str) -> bool:
        sym = self.symbols.get(name)
        return sym is not None and sym in self.functions

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{s}/{f.arity}" for s, f in self.functions.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
