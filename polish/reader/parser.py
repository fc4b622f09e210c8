"""
  Arity-directed parser

There are no parentheses: how many argument expressions follow a name is read
from the Environment at parse time. The grammar therefore changes as
declarations are processed.

    <declaration> ::= DECL NAME* ARROW <expr>
    <expr>        ::= NAME <expr>{arity(NAME)}   ; global function application
                    | NAME                       ; parameter of the declaration
                    | NUM | TEXT

Parameter references are compiled to Arg(index) against the innermost
declaration; globals become App(symbol, args).
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from polish.errors import PolishNameError, PolishSyntaxError
from polish.reader.tokenizer import Token, TokenKind
from polish.types.environment import Environment
from polish.types.expression import App, Arg, Expression, Literal
from polish.types.function import PLACEHOLDER_BODY, UserDefined
from polish.types.symbol import Symbol

log = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)


def _stream(tokens: Iterable[Token] | TokenStream) -> TokenStream:
    return tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)


def parse_declarations(tokens: Iterable[Token] | TokenStream, env: Environment) -> list[Symbol]:
    """Parse `\\name params -> body` declarations into `env`.

    Each function is first registered with a placeholder body and its final
    arity so that its body can call it recursively, then re-declared with the
    parsed body. Only self-reference and earlier declarations resolve.

    Returns the declared Symbols in source order. On error the Environment may
    hold the placeholder of the failed declaration; callers that need to
    continue should wrap the call in `env.transaction()`.
    """
    stream = _stream(tokens)
    declared: list[Symbol] = []

    while (tok := stream.advance()) is not None:
        if tok.kind is not TokenKind.DECL:
            raise PolishSyntaxError(f"expected declaration, found {tok.kind}", tok.span)
        name = tok.value

        params: list[str] = []
        while (nxt := stream.peek()) is not None and nxt.kind is TokenKind.NAME:
            params.append(stream.advance().value)

        arrow = stream.advance()
        if arrow is None:
            raise PolishSyntaxError("expected arrow, found <eof>")
        if arrow.kind is not TokenKind.ARROW:
            raise PolishSyntaxError(f"expected arrow, found {arrow.kind}", arrow.span)

        existing = env.resolve(name)
        if existing is not None and not existing[1].is_placeholder:
            log.warning("redeclaring %s (was arity %d)", name, existing[1].arity)

        sym = env.declare(name, len(params), PLACEHOLDER_BODY)
        body = parse_expression(stream, params, env)
        env.declare(sym, len(params), UserDefined(body))
        log.debug("declared %s/%d", name, len(params))
        declared.append(sym)

    return declared


def parse_expression(
    tokens: Iterable[Token] | TokenStream, params: Sequence[str], env: Environment
) -> Expression:
    """Parse exactly one expression, consuming as many arguments as each callee declares."""
    stream = _stream(tokens)
    tok = stream.advance()
    if tok is None:
        raise PolishSyntaxError("expected expression, found <eof>")

    match tok.kind:
        case TokenKind.NAME:
            name = tok.value
            # Locals shadow globals; a repeated parameter name binds its first position
            if name in params:
                return Arg(params.index(name))
            resolved = env.resolve(name)
            if resolved is None:
                raise PolishNameError(f"cannot find function or local {name}", tok.span)
            sym, func = resolved
            args = tuple(parse_expression(stream, params, env) for _ in range(func.arity))
            return App(sym, args)
        case TokenKind.NUM | TokenKind.TEXT:
            return Literal(tok.value)

    raise PolishSyntaxError(f"unexpected token {tok.kind}", tok.span)


def parse_input(
    tokens: Iterable[Token] | TokenStream, env: Environment
) -> list[Symbol] | Expression | None:
    """Parse one interactive input line.

    A line starting with a declaration is parsed as declarations and returns
    the declared Symbols; otherwise it must hold exactly one expression.
    Returns None for an empty line.
    """
    stream = _stream(tokens)
    first = stream.peek()
    if first is None:
        return None
    if first.kind is TokenKind.DECL:
        return parse_declarations(stream, env)

    expr = parse_expression(stream, (), env)
    trailing = stream.peek()
    if trailing is not None:
        raise PolishSyntaxError(f"unexpected token {trailing.kind} after expression", trailing.span)
    return expr
