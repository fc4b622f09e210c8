import io

import pytest

from polish.builtins import default_environment
from polish.evaluation.evaluator import evaluate
from polish.interpreter import Interpreter
from polish.reader.parser import parse_declarations, parse_expression
from polish.reader.tokenizer import tokenize


@pytest.fixture
def output():
    """Stream that the print builtin writes to."""
    return io.StringIO()


@pytest.fixture
def env(output):
    """Fresh environment with builtins loaded."""
    return default_environment(output)


@pytest.fixture
def interp(output):
    return Interpreter(output=output)


@pytest.fixture
def run(env):
    """Declare `program` (if any) into `env`, then evaluate `expr` with an empty frame."""
    def _run(expr, program=""):
        if program:
            parse_declarations(tokenize(program), env)
        return evaluate(parse_expression(tokenize(expr), (), env), env)
    return _run
