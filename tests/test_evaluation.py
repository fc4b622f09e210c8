import pytest
from hypothesis import given, strategies as st

from polish.builtins import default_environment
from polish.errors import PolishArithmeticError, PolishInternalError, PolishNameError, PolishTypeError
from polish.evaluation.evaluator import evaluate
from polish.reader.parser import parse_declarations, parse_expression
from polish.reader.tokenizer import tokenize
from polish.types.expression import App, Arg, Literal, Placeholder
from polish.types.function import LazyBuiltin, PLACEHOLDER_BODY, UserDefined
from polish.types.unit import Unit
from polish.types.value import MAX_NUMBER

FAC = "\\fac n -> if = n 0 1 * n fac - n 1"


def test_self_evaluating_literals(env):
    assert evaluate(Literal(3), env) == 3
    assert evaluate(Literal("hello"), env) == "hello"


def test_arg_reads_the_current_frame(env):
    assert evaluate(Arg(1), env, ("a", "b")) == "b"


@pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (4, 24), (10, 3628800)])
def test_recursive_factorial(run, n, expected):
    assert run(f"fac {n}", FAC) == expected


def test_user_function_gets_fresh_frame(run):
    # `g`'s Arg(0) is its own parameter, not `f`'s
    program = "\\g y -> * y 10\n\\f x y -> + g y x"
    assert run("f 1 2", program) == 21


def test_nested_user_calls(run):
    program = "\\sq x -> * x x\n\\sumsq a b -> + sq a sq b"
    assert run("sumsq 3 4", program) == 25


def test_if_never_evaluates_untaken_branch(run):
    assert run("if true 1 / 1 0") == 1
    assert run("if false / 1 0 2") == 2


def test_if_untaken_branch_side_effects_do_not_happen(run, output):
    assert run('if = 1 1 "yes" print "never"') == "yes"
    assert output.getvalue() == ""


def test_if_requires_boolean_condition(run):
    with pytest.raises(PolishTypeError) as exc:
        run("if 1 2 3")
    assert exc.value.position == 1


def test_if_branch_errors_still_propagate(run):
    with pytest.raises(PolishArithmeticError):
        run("if true / 1 0 2")


def test_eager_arguments_evaluate_left_to_right(run, output):
    run('pair print "first" print "second"')
    assert output.getvalue() == "first\nsecond\n"


def test_mutual_recursion_needs_ordering(env):
    # `odd` cannot see `even` before it is declared
    with pytest.raises(PolishNameError):
        parse_declarations(tokenize("\\odd n -> if = n 0 false even - n 1\n\\even n -> 1"), env)


def test_evaluation_error_keeps_environment_usable(run):
    with pytest.raises(PolishArithmeticError):
        run("fac / 1 0", FAC)
    assert run("fac 3") == 6


def test_lazy_builtin_receives_raw_expressions(env):
    seen = []

    def first_only(args, evaluate_fn, env, frame):
        seen.extend(args)
        return evaluate_fn(args[0], env, frame)

    env.declare("first", 2, LazyBuiltin(first_only))
    expr = App(env.intern("first"), (Arg(0), App(env.intern("/"), (Literal(1), Literal(0)))))
    assert evaluate(expr, env, (42,)) == 42
    assert seen[0] == Arg(0)


def test_placeholder_is_an_internal_error(env):
    with pytest.raises(PolishInternalError):
        evaluate(Placeholder, env)


def test_calling_function_still_being_declared_is_internal_error(env):
    sym = env.declare("pending", 0, PLACEHOLDER_BODY)
    with pytest.raises(PolishInternalError):
        evaluate(App(sym), env)


def test_dangling_arg_is_internal_error(env):
    with pytest.raises(PolishInternalError):
        evaluate(Arg(2), env, (1,))


def test_unknown_symbol_after_parsing_is_internal_error(env):
    ghost = env.intern("ghost")
    with pytest.raises(PolishInternalError):
        evaluate(App(ghost), env)


def test_print_returns_unit(run, output):
    assert run("print + 1 2") is Unit
    assert output.getvalue() == "3\n"


def test_user_defined_body_direct(env):
    sym = env.declare("seven", 0, UserDefined(Literal(7)))
    assert evaluate(App(sym), env) == 7


@given(
    st.integers(min_value=0, max_value=MAX_NUMBER),
    st.integers(min_value=0, max_value=MAX_NUMBER),
)
def test_addition_is_checked_unsigned(a, b):
    env = default_environment()
    expr = parse_expression(tokenize(f"+ {a} {b}"), (), env)
    if a + b > MAX_NUMBER:
        with pytest.raises(PolishArithmeticError):
            evaluate(expr, env)
    else:
        assert evaluate(expr, env) == a + b
