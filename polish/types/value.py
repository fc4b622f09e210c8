"""Runtime values for Polish.

Values are plain Python objects, tagged by their Python type:

    - Number  -> int in the unsigned 64-bit range
    - Text    -> str
    - Boolean -> bool
    - List    -> list of values
    - Unit    -> the Unit sentinel

`bool` is a subclass of `int`, so every kind check tests booleans first.
"""

from __future__ import annotations

from polish import Value
from polish.errors import PolishArithmeticError
from polish.types.unit import Unit, UnitType

MAX_NUMBER = 2**64 - 1


def is_number(value: Value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def kind_of(value: Value) -> str:
    """Name of the value's kind as used in error messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, list):
        return "list"
    if isinstance(value, UnitType):
        return "unit"
    return type(value).__name__


def check_number(n: int, op: str) -> int:
    if n < 0 or n > MAX_NUMBER:
        raise PolishArithmeticError(f"attempt to {op} with overflow")
    return n


def copy_value(value: Value) -> Value:
    # Lists are the only compound value; scalars are immutable
    if isinstance(value, list):
        return [copy_value(v) for v in value]
    return value


def render(value: Value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(render(v) for v in value) + "]"
    if value is Unit or isinstance(value, UnitType):
        return "none"
    return str(value)
