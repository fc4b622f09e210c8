from __future__ import annotations

from itertools import count


class Symbol:
    """Interned function name.

    Symbols are only created by a SymbolTable and compare by identity, so a
    lookup keyed on a Symbol never re-hashes or compares the name text.
    """

    __slots__ = ("id", "name")

    def __init__(self, id: int, name: str):
        self.id = id
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Interns names into Symbols; each name is interned exactly once."""

    __slots__ = ("_symbols", "_ids")

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}
        self._ids = count()

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(next(self._ids), name)
            self._symbols[name] = sym
        return sym

    def get(self, name: str) -> Symbol | None:
        return self._symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
