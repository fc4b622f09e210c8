"""Function records stored in the Environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from polish import Value, EvaluatorFn, Frame
from polish.types.expression import Expression, Placeholder

EagerFn = Callable[[Sequence[Value]], Value]
# (raw argument expressions, evaluator, environment, caller frame) -> Value
LazyFn = Callable[[Sequence[Expression], EvaluatorFn, "Environment", Frame], Value]


@dataclass(frozen=True, slots=True)
class UserDefined:
    body: Expression


@dataclass(frozen=True, slots=True)
class EagerBuiltin:
    fn: EagerFn


@dataclass(frozen=True, slots=True)
class LazyBuiltin:
    fn: LazyFn


FunctionBody = UserDefined | EagerBuiltin | LazyBuiltin

# Registered while a declaration's own body is being parsed
PLACEHOLDER_BODY = UserDefined(Placeholder)


@dataclass(frozen=True, slots=True)
class Function:
    """A named callable: fixed arity plus one of the body kinds."""

    arity: int
    body: FunctionBody

    @property
    def is_placeholder(self) -> bool:
        return isinstance(self.body, UserDefined) and self.body.body is Placeholder

    @property
    def kind(self) -> str:
        match self.body:
            case UserDefined():
                return "placeholder" if self.is_placeholder else "user"
            case EagerBuiltin():
                return "builtin"
            case LazyBuiltin():
                return "lazy builtin"
        return "unknown"
