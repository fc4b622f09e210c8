import sys
from timeit import timeit

from polish.builtins import default_environment
from polish.config import get_recursion_limit
from polish.evaluation.evaluator import evaluate
from polish.reader.parser import parse_declarations, parse_expression
from polish.reader.tokenizer import tokenize


def _prepare(program: str, expr: str):
    env = default_environment()
    parse_declarations(tokenize(program), env)
    return env, parse_expression(tokenize(expr), (), env)


def time_parse(program: str, rounds: int) -> float:
    """Time tokenizing and parsing `program` into a fresh environment each round."""
    tokens = tokenize(program)
    return timeit(lambda: parse_declarations(tokens, default_environment()), number=rounds)


def time_evaluate(program: str, expr: str, rounds: int) -> float:
    """Parse once, then repeatedly evaluate the same expression tree."""
    env, parsed = _prepare(program, expr)
    # Warmup
    evaluate(parsed, env)
    # Timed
    return timeit(lambda: evaluate(parsed, env), number=rounds)


def bench_symbol_resolution(n_names: int = 1000, n_lookups: int = 10000) -> float:
    env = default_environment()
    for i in range(n_names):
        env.declare(f"f{i}", 0, env.resolve("true")[1].body)
    sym = env.intern("f500")
    for _ in range(1000):
        env.lookup(sym)
    return timeit(lambda: env.lookup(sym), number=n_lookups)


FACTORIAL = r"\fac n -> if = n 0 1 * n fac - n 1"

SUM_TO = r"\sum n acc -> if = n 0 acc sum - n 1 + acc n"


def _print_result(name: str, seconds: float, rounds: int) -> None:
    print(f"Benchmark: {name}")
    print(f"  time: {seconds:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    sys.setrecursionlimit(get_recursion_limit())
    _print_result("symbol resolution", bench_symbol_resolution(), 10000)
    _print_result("parse factorial", time_parse(FACTORIAL, 5000), 5000)
    _print_result("factorial 20", time_evaluate(FACTORIAL, "fac 20", 2000), 2000)
    _print_result("sum 1..500 (recursive)", time_evaluate(SUM_TO, "sum 500 0", 200), 200)
