from polish import EvaluatorFn, Frame, Value
from polish.errors import PolishTypeError
from polish.types.environment import Environment
from polish.types.expression import Expression
from polish.types.value import kind_of


def if_form(
    args: list[Expression],
    evaluate_fn: EvaluatorFn,
    env: Environment,
    frame: Frame,
) -> Value:
    cond = evaluate_fn(args[0], env, frame)
    if not isinstance(cond, bool):
        raise PolishTypeError(
            f"wrong argument type for index 1: expected boolean, found {kind_of(cond)}",
            position=1,
            kinds=("boolean", kind_of(cond)),
        )

    # Only the chosen branch is evaluated
    if cond:
        return evaluate_fn(args[1], env, frame)
    return evaluate_fn(args[2], env, frame)
