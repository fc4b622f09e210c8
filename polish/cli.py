"""Command line entry point: run a .pn file, evaluate an expression, or start the shell."""

from __future__ import annotations

import argparse
import logging
import sys

from polish import __version__
from polish.config import get_recursion_limit
from polish.diagnostics import print_diagnostic
from polish.errors import PolishError
from polish.interpreter import Interpreter
from polish.repl import Shell
from polish.types.value import render


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polish",
        description="Prefix-notation interpreter where each function's arity drives the parse.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fac.pn                 # load fac.pn and print the value of main
  %(prog)s fac.pn -e "fac 5"      # load fac.pn and evaluate one expression
  %(prog)s -i fac.pn              # load fac.pn, then start the shell
  %(prog)s                        # start the shell
        """,
    )
    parser.add_argument("file", nargs="?", help="source file to load (runs main unless -e or -i is given)")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the shell after loading")
    parser.add_argument("-e", "--eval", metavar="EXPR", help="evaluate EXPR after loading and print it")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"polish {__version__}")
    return parser


def run(args: argparse.Namespace, interp: Interpreter) -> int:
    try:
        if args.file is not None:
            interp.load_file(args.file)
        if args.eval is not None:
            value = interp.eval(args.eval)
            if value is not None:
                print(render(value))
        elif args.file is not None and not args.interactive:
            print(render(interp.run_main()))
    except PolishError as err:
        print_diagnostic(err)
        return 1
    except RecursionError:
        print_diagnostic(PolishError("maximum recursion depth exceeded"))
        return 1

    if args.interactive or (args.file is None and args.eval is None):
        Shell(interp).cmdloop()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    sys.setrecursionlimit(get_recursion_limit())
    return run(args, Interpreter())


if __name__ == "__main__":
    sys.exit(main())
