from __future__ import annotations

from typing import Optional

from polish.types.span import Span


class PolishError(Exception):
    """ Base class for all Polish errors.

    An error is either general (message only) or spanned (message plus the
    source range that caused it). The core never prints errors; callers
    attach the originating source with `with_source` and render them.
    """

    def __init__(self, message: str, span: Optional[Span] = None):
        super().__init__(message)
        self.message = message
        self.span = span
        self.origin: str | None = None
        self.source: str | None = None

    @property
    def spanned(self) -> bool:
        return self.span is not None

    def with_source(self, source: str, origin: str | None = None) -> PolishError:
        # Keep the innermost origin when errors cross nested loads
        if self.source is None:
            self.source = source
            self.origin = origin
        return self

    def __str__(self):
        return self.message


class PolishSyntaxError(PolishError):
    """ Raised when the token stream does not have the expected shape"""


class PolishNameError(PolishError):
    """ Raised when a name is neither a local nor a known function"""


class PolishTypeError(PolishError):
    """ Raised when a builtin receives an argument of the wrong kind"""

    def __init__(self, message: str, position: int | None = None, kinds: tuple[str, ...] = ()):
        super().__init__(message)
        self.position = position
        self.kinds = kinds


class PolishArithmeticError(PolishError):
    """ Raised on division by zero and unsigned overflow/underflow"""


class PolishRuntimeError(PolishError):
    """ Raised for recoverable evaluation failures (empty lists, missing main)"""


class PolishInternalError(PolishError):
    """ Raised when an interpreter invariant is broken; this is a bug, not user error"""
