"""Interactive mode for the Polish interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd

from polish.diagnostics import print_diagnostic
from polish.errors import PolishError
from polish.interpreter import Interpreter
from polish.types.value import render


class Shell(cmd.Cmd):
    """Polish interpreter shell.

    Plain lines are declarations or expressions; shell commands start with
    ':' so that they never shadow a function of the same name.
    """
    intro = "Polish notation interpreter\nType ':help' for more information."
    prompt = "> "

    def __init__(self, interp: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp if interp is not None else Interpreter()

    def cmdloop(self, intro=None):
        """Reads lines until a command stops the shell or input runs out.

        End of input calls do_EOF; a typed 'EOF' line is evaluated like any
        other line.
        """
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")
        stop = None
        while not stop:
            line = self.readline()
            if line is None:
                stop = self.do_EOF("")
                break
            line = self.precmd(line)
            stop = self.onecmd(line)
            stop = self.postcmd(stop, line)
        self.postloop()

    def readline(self) -> str | None:
        """Next input line, or None at end of input."""
        if self.cmdqueue:
            return self.cmdqueue.pop(0)
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def parseline(self, line):
        line = line.strip()
        if line.startswith(":"):
            command, arg, rest = super().parseline(line[1:])
            return command, arg, ":" + rest
        return None, None, line

    def default(self, line):
        """Evaluates a declaration or expression against the live environment."""
        if line.startswith(":"):
            print(f"unknown command '{line.split()[0]}'", file=self.stdout)
            return False
        try:
            value = self.interp.eval(line)
        except PolishError as err:
            print_diagnostic(err, file=self.stdout)
            return False
        except RecursionError:
            print_diagnostic(PolishError("maximum recursion depth exceeded"), file=self.stdout)
            return False
        if value is not None:
            print(render(value), file=self.stdout)
        return False

    def do_load(self, arg):
        """Loads declarations from a file into the live environment: :load FILE"""
        if not arg:
            print("usage: :load FILE", file=self.stdout)
            return False
        try:
            declared = self.interp.load_file(arg.strip())
        except PolishError as err:
            print_diagnostic(err, file=self.stdout)
            return False
        except RecursionError:
            print_diagnostic(PolishError("maximum recursion depth exceeded"), file=self.stdout)
            return False
        print(f"loaded {len(declared)} declaration(s) from {arg.strip()}", file=self.stdout)
        return False

    def do_functions(self, arg):
        """Lists every registered function with its arity."""
        for sym, func in sorted(self.interp.env.items(), key=lambda item: item[0].name):
            print(f"{sym.name}/{func.arity}  ({func.kind})", file=self.stdout)
        return False

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Declarations look like '\\name param ... -> body'; anything else is an\n"
              "expression evaluated against the functions defined so far. Calls have no\n"
              "parentheses: each function consumes exactly as many arguments as it declares,\n"
              "so '+ * 2 3 4' is (2 * 3) + 4.\n\n"
              "Commands:\n"
              "  :load FILE    load declarations from FILE\n"
              "  :functions    list functions and their arities\n"
              "  :quit         leave the interpreter", file=self.stdout)
        return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True

    def do_quit(self, arg):
        """Exits interpreter."""
        return True

    do_exit = do_quit
