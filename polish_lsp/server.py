from __future__ import annotations

"""
A minimal pygls-based Language Server for Polish.

Features:
- Full text synchronization and document store
- Diagnostics: tokenizer and parser errors (with spans), missing main
- Hover: builtin and declared signatures with arity
- Completion: builtins and declared names
- Document Symbols: declarations

Note: We avoid evaluating the buffer. Parsing runs against a fresh
environment per document.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from polish import __version__
from polish_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, IndexDiagnostic, build_index


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class PolishLanguageServer(LanguageServer):
    CMD_NAME = "polish-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            f"v{__version__}",
            text_document_sync_kind=types.TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, DocumentState] = {}


ls = PolishLanguageServer()


# --- Text sync ---
@ls.feature(types.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: types.DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature(types.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: types.DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature(types.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: types.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.text_document_publish_diagnostics(types.PublishDiagnosticsParams(uri=uri, diagnostics=[]))


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.text_document_publish_diagnostics(
        types.PublishDiagnosticsParams(uri=uri, diagnostics=to_lsp_diagnostics(idx))
    )


# --- Diagnostics ---
def _to_range(diag: IndexDiagnostic) -> types.Range:
    (sl, sc), (el, ec) = diag.start, diag.end
    if (sl, sc) == (el, ec):
        ec += 1
    return types.Range(
        start=types.Position(line=sl, character=sc),
        end=types.Position(line=el, character=ec),
    )


def to_lsp_diagnostics(idx: DocumentIndex) -> List[types.Diagnostic]:
    return [
        types.Diagnostic(
            range=_to_range(d),
            message=d.message,
            severity=(
                types.DiagnosticSeverity.Error
                if d.severity == "error"
                else types.DiagnosticSeverity.Information
            ),
            source=PolishLanguageServer.CMD_NAME,
        )
        for d in idx.diagnostics
    ]


# --- Hover ---
def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    if word.startswith("\\"):
        word = word[1:]
    if word in idx.declarations:
        d = idx.declarations[word]
        return f"{d.signature}  (arity {d.arity}, defined at {d.line + 1}:{d.col + 1})"
    return BUILTIN_SIGNATURES.get(word)


@ls.feature(types.TEXT_DOCUMENT_HOVER)
def on_hover(params: types.HoverParams) -> Optional[types.Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    contents = describe(word, state.index) if word else None
    if contents is None:
        return None
    return types.Hover(contents=types.MarkupContent(kind=types.MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(types.TEXT_DOCUMENT_COMPLETION)
def on_completion(params: types.CompletionParams) -> types.CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[types.CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(types.CompletionItem(label=name, kind=types.CompletionItemKind.Function, detail=sig))
    if state:
        for name, d in state.index.declarations.items():
            items.append(
                types.CompletionItem(label=name, kind=types.CompletionItemKind.Function, detail=d.signature)
            )
    return types.CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(types.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: types.DocumentSymbolParams) -> Optional[List[types.DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[types.DocumentSymbol] = []
    for name, d in state.index.declarations.items():
        rng = types.Range(
            start=types.Position(line=d.line, character=d.col),
            end=types.Position(line=d.line, character=d.col + len(name)),
        )
        symbols.append(
            types.DocumentSymbol(
                name=name,
                detail=d.signature,
                kind=types.SymbolKind.Function,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def _extract_word_at(text: str, pos: types.Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # words are whitespace-delimited
    start = pos.character
    while start > 0 and not line[start - 1].isspace():
        start -= 1
    end = pos.character
    while end < len(line) and not line[end].isspace():
        end += 1
    return line[start:end] or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
