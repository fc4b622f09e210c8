from __future__ import annotations

"""
Indexer for Polish source files without evaluating code.

Two passes over a document:
- a token-level scan of declaration headers (\\name params ->) that works even
  when the file does not parse, to power document symbols, hover and
  completion;
- a full parse against a fresh default Environment, whose first error (with
  its span) becomes the document's diagnostic.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from polish.builtins import default_environment
from polish.errors import PolishError
from polish.reader.parser import parse_declarations
from polish.reader.tokenizer import Token, TokenKind, tokenize
from polish.types.span import Span


@dataclass
class DeclarationDef:
    name: str
    params: List[str]
    line: int
    col: int

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def signature(self) -> str:
        return " ".join([f"\\{self.name}", *self.params, "->"])


@dataclass
class IndexDiagnostic:
    message: str
    start: Tuple[int, int]  # (line, col), 0-based
    end: Tuple[int, int]
    severity: str = "error"  # "error" | "information"


@dataclass
class DocumentIndex:
    declarations: Dict[str, DeclarationDef] = field(default_factory=dict)
    diagnostics: List[IndexDiagnostic] = field(default_factory=list)


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _range(text: str, span: Optional[Span]) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    if span is None:
        # General errors (end of input) point at the end of the document
        end = _position_from_offset(text, len(text))
        return end, end
    return _position_from_offset(text, span.start), _position_from_offset(text, span.end)


def _scan_declarations(text: str, tokens: List[Token]) -> Dict[str, DeclarationDef]:
    decls: Dict[str, DeclarationDef] = {}
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        i += 1
        if tok.kind is not TokenKind.DECL:
            continue
        params = []
        while i < len(tokens) and tokens[i].kind is TokenKind.NAME:
            params.append(tokens[i].value)
            i += 1
        if i < len(tokens) and tokens[i].kind is TokenKind.ARROW:
            line, col = _position_from_offset(text, tok.span.start)
            decls[tok.value] = DeclarationDef(name=tok.value, params=params, line=line, col=col)
    return decls


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    try:
        tokens = tokenize(text)
    except PolishError as err:
        start, end = _range(text, err.span)
        idx.diagnostics.append(IndexDiagnostic(err.message, start, end))
        return idx

    idx.declarations = _scan_declarations(text, tokens)

    env = default_environment()
    try:
        parse_declarations(tokens, env)
    except PolishError as err:
        start, end = _range(text, err.span)
        idx.diagnostics.append(IndexDiagnostic(err.message, start, end))
        return idx
    except RecursionError:
        start, end = _range(text, None)
        idx.diagnostics.append(IndexDiagnostic("maximum recursion depth exceeded", start, end))
        return idx

    main = idx.declarations.get("main")
    if main is None or main.arity != 0:
        origin = (0, 0) if main is None else (main.line, main.col)
        idx.diagnostics.append(
            IndexDiagnostic("no main function found", origin, origin, severity="information")
        )
    return idx


def _builtin_signatures() -> Dict[str, str]:
    sigs = {}
    for sym, func in default_environment().items():
        args = " ".join(f"arg{i + 1}" for i in range(func.arity))
        sigs[sym.name] = f"{sym.name} {args}".rstrip() + f"  ({func.kind}, arity {func.arity})"
    return sigs


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = _builtin_signatures()
