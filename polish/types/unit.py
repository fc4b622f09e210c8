from __future__ import annotations


class UnitType:
    __slots__ = ()

    def __repr__(self): return "none"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Unit = UnitType()
