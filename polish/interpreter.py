from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from polish import Value
from polish.builtins import default_environment
from polish.config import find_source
from polish.errors import PolishError, PolishRuntimeError
from polish.evaluation.evaluator import evaluate
from polish.reader.parser import parse_declarations, parse_input
from polish.reader.tokenizer import tokenize
from polish.types.environment import Environment
from polish.types.function import UserDefined
from polish.types.symbol import Symbol

log = logging.getLogger(__name__)

INPUT_ORIGIN = "<input>"


class Interpreter:
    """
    Keeps one live Environment across loads and evaluations.

    Loads are transactional: if any declaration in a batch fails, the
    Environment is left exactly as it was before the load.
    """

    def __init__(self, output: TextIO | None = None, env: Environment | None = None):
        self.env: Environment = env if env is not None else default_environment(output)

    def load(self, source: str, origin: str = INPUT_ORIGIN) -> list[Symbol]:
        """Parse declarations from `source` into the live Environment."""
        try:
            tokens = tokenize(source)
            with self.env.transaction():
                declared = parse_declarations(tokens, self.env)
        except PolishError as err:
            err.with_source(source, origin)
            raise
        log.debug("loaded %d declarations from %s", len(declared), origin)
        return declared

    def load_file(self, path: str | Path) -> list[Symbol]:
        resolved = find_source(path)
        try:
            source = resolved.read_text(encoding="utf-8")
        except OSError:
            raise PolishError(f"could not open {path}") from None
        except UnicodeDecodeError:
            raise PolishError(f"could not decode {path} as UTF-8") from None
        return self.load(source, str(resolved))

    def eval(self, source: str) -> Value | None:
        """Evaluate one interactive line.

        Declarations are committed and return None; an expression is
        evaluated with an empty frame and its value returned.
        """
        try:
            tokens = tokenize(source)
            with self.env.transaction():
                parsed = parse_input(tokens, self.env)
            if parsed is None or isinstance(parsed, list):
                return None
            return evaluate(parsed, self.env)
        except PolishError as err:
            err.with_source(source, INPUT_ORIGIN)
            raise

    def run_main(self) -> Value:
        resolved = self.env.resolve("main")
        if resolved is None:
            raise PolishRuntimeError("no main function found")
        sym, func = resolved
        if func.arity != 0 or not isinstance(func.body, UserDefined) or func.is_placeholder:
            raise PolishRuntimeError("no main function found")
        log.debug("evaluating main")
        return evaluate(func.body.body, self.env, ())

    def run_file(self, path: str | Path) -> Value:
        self.load_file(path)
        return self.run_main()
