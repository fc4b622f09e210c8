from __future__ import annotations

import sys
from typing import Sequence, TextIO

from polish import Value
from polish.errors import PolishArithmeticError, PolishRuntimeError, PolishTypeError
from polish.evaluation.special_forms import SPECIAL_FORMS
from polish.types.environment import Environment
from polish.types.function import EagerBuiltin, EagerFn, LazyBuiltin
from polish.types.unit import Unit
from polish.types.value import check_number, copy_value, is_number, kind_of, render


# -------------------------------
# Argument checking
# -------------------------------
def wrong_type(position: int, expected: str, found: Value) -> PolishTypeError:
    return PolishTypeError(
        f"wrong argument type for index {position}: expected {expected}, found {kind_of(found)}",
        position=position,
        kinds=(expected, kind_of(found)),
    )


def numbers(args: Sequence[Value]) -> tuple[int, int]:
    lhs, rhs = args
    if not is_number(lhs):
        raise wrong_type(1, "number", lhs)
    if not is_number(rhs):
        raise wrong_type(2, "number", rhs)
    return lhs, rhs


def a_list(args: Sequence[Value]) -> list:
    if not isinstance(args[0], list):
        raise wrong_type(1, "list", args[0])
    return args[0]


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Value]) -> Value:
    lhs, rhs = args
    if is_number(lhs) and is_number(rhs):
        return check_number(lhs + rhs, "add")
    if isinstance(lhs, str) and isinstance(rhs, str):
        return lhs + rhs
    # Blame the first argument unless it is a valid left-hand side
    position = 2 if is_number(lhs) or isinstance(lhs, str) else 1
    raise PolishTypeError(
        f"cannot add {kind_of(lhs)} and {kind_of(rhs)}",
        position=position,
        kinds=(kind_of(lhs), kind_of(rhs)),
    )


def sub(args: Sequence[Value]) -> int:
    lhs, rhs = numbers(args)
    return check_number(lhs - rhs, "subtract")


def mul(args: Sequence[Value]) -> int:
    lhs, rhs = numbers(args)
    return check_number(lhs * rhs, "multiply")


def div(args: Sequence[Value]) -> int:
    lhs, rhs = numbers(args)
    if rhs == 0:
        raise PolishArithmeticError("attempt to divide by zero")
    return lhs // rhs


def mod(args: Sequence[Value]) -> int:
    lhs, rhs = numbers(args)
    if rhs == 0:
        raise PolishArithmeticError("attempt to calculate the remainder with a divisor of zero")
    return lhs % rhs


# -------------------------------
# Comparison
# -------------------------------
def lt(args: Sequence[Value]) -> bool:
    lhs, rhs = numbers(args)
    return lhs < rhs


def gt(args: Sequence[Value]) -> bool:
    lhs, rhs = numbers(args)
    return lhs > rhs


def eq(args: Sequence[Value]) -> bool:
    lhs, rhs = numbers(args)
    return lhs == rhs


# -------------------------------
# List operations
# -------------------------------
def pair(args: Sequence[Value]) -> list:
    return [copy_value(args[0]), copy_value(args[1])]


def head(args: Sequence[Value]) -> Value:
    xs = a_list(args)
    if not xs:
        raise PolishRuntimeError("head of an empty list")
    return copy_value(xs[0])


def tail(args: Sequence[Value]) -> list:
    xs = a_list(args)
    if not xs:
        raise PolishRuntimeError("tail of an empty list")
    return copy_value(xs[1:])


def fuse(args: Sequence[Value]) -> list:
    lhs, rhs = (copy_value(a) for a in args)
    match lhs, rhs:
        case list(), list():
            return lhs + rhs
        case list(), _:
            return lhs + [rhs]
        case _, list():
            return [lhs] + rhs
    return [lhs, rhs]


# -------------------------------
# Output
# -------------------------------
def make_print(output: TextIO | None) -> EagerFn:
    def print_value(args: Sequence[Value]) -> Value:
        # Resolve stdout lazily so redirected streams are honoured
        stream = output if output is not None else sys.stdout
        stream.write(render(args[0]) + "\n")
        return Unit

    return print_value


# -------------------------------
# Registration
# -------------------------------
EAGER_BUILTINS: dict[str, tuple[int, EagerFn]] = {
    "+": (2, add),
    "-": (2, sub),
    "*": (2, mul),
    "/": (2, div),
    "%": (2, mod),
    "<": (2, lt),
    ">": (2, gt),
    "=": (2, eq),
    "true": (0, lambda args: True),
    "false": (0, lambda args: False),
    "none": (0, lambda args: Unit),
    "pair": (2, pair),
    "head": (1, head),
    "tail": (1, tail),
    "fuse": (2, fuse),
}


def register(env: Environment, output: TextIO | None = None) -> Environment:
    for name, (arity, fn) in EAGER_BUILTINS.items():
        env.declare(name, arity, EagerBuiltin(fn))
    env.declare("print", 1, EagerBuiltin(make_print(output)))
    for name, (arity, fn) in SPECIAL_FORMS.items():
        env.declare(name, arity, LazyBuiltin(fn))
    return env


def default_environment(output: TextIO | None = None) -> Environment:
    """Fresh Environment with every builtin registered."""
    return register(Environment(), output)
