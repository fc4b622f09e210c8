# Core type aliases for Polish's data model.
# Runtime values are plain Python values: int (unsigned 64-bit range), str,
# bool, list, plus the Unit sentinel. Expression trees are the small node
# classes in polish.types.expression.
#
# Naming guidance:
# - Value:  use in evaluator/builtin code to denote evaluated values.
# - Frame:  the positional argument values of the call currently in scope.

from typing import Any, Callable, Sequence

__version__ = "0.1.0"

# Runtime value alias
Value = Any
# Arguments of the innermost call, indexed by Arg nodes
Frame = Sequence[Value]

# Evaluator function type handed to lazy builtins
EvaluatorFn = Callable[..., Value]
