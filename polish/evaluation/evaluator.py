"""Tree-walking evaluator for Polish.

Name resolution is finished by the time an expression reaches the evaluator:
parameters are Arg indices into the flat frame of the current call, and every
App names a Symbol with a known arity. Each nested application is a native
recursive call; there is no explicit call stack.
"""

from __future__ import annotations

from polish import Value, Frame
from polish.errors import PolishInternalError
from polish.types.environment import Environment
from polish.types.expression import App, Arg, Expression, Literal, PlaceholderType
from polish.types.function import EagerBuiltin, LazyBuiltin, UserDefined


def evaluate(expr: Expression, env: Environment, frame: Frame = ()) -> Value:
    """Evaluate `expr` against the argument values of the call in scope."""
    match expr:
        case Arg(index):
            try:
                return frame[index]
            except IndexError:
                raise PolishInternalError(
                    f"argument {index} out of range for a frame of {len(frame)}"
                ) from None

        case Literal(value):
            return value

        case App(callee, args):
            func = env.lookup(callee)
            match func.body:
                case UserDefined(body):
                    # The callee's Arg indices refer to this new frame only
                    new_frame = tuple(evaluate(arg, env, frame) for arg in args)
                    return evaluate(body, env, new_frame)
                case EagerBuiltin(fn):
                    return fn([evaluate(arg, env, frame) for arg in args])
                case LazyBuiltin(fn):
                    return fn(args, evaluate, env, frame)

        case PlaceholderType():
            raise PolishInternalError(
                "attempted to evaluate a declaration that is still being parsed"
            )

    raise PolishInternalError(f"cannot evaluate {expr!r}")
