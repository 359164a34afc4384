from __future__ import annotations

"""
A minimal pygls-based Language Server for Ember data files.

Features:
- Text synchronization and document store
- Diagnostics: the first reader error in the document, at its location
- Hover: the tag and canonical text of the datum under the cursor
- Document Symbols: one per top-level datum

Note: We never evaluate the buffer. Each change re-reads the whole document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from pygls.server import LanguageServer
from pygls.workspace import TextDocument
from lsprotocol.types import (
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    TextDocumentContentChangeEvent,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    DocumentSymbolParams,
    DocumentSymbol,
    SymbolKind,
)

from ember.registry import SingletonRegistry
from ember.types.boolean import Boolean
from ember.types.character import Character
from ember.types.fixnum import Fixnum
from ember.types.string import String
from ember_lsp.indexer import build_index, datum_at, describe, label, Datum, DocumentIndex

logger = logging.getLogger(__name__)

SOURCE = "ember-ls"


@dataclass
class DocumentState:
    document: TextDocument
    index: DocumentIndex

    @property
    def text(self) -> str:
        return self.document.source


class EmberLanguageServer(LanguageServer):
    CMD_NAME = "ember-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}
        self.registry = SingletonRegistry()

    def update_document(self, uri: str, text: str) -> DocumentState:
        return self._index(TextDocument(uri, source=text))

    def apply_changes(
        self, uri: str, changes: Iterable[TextDocumentContentChangeEvent]
    ) -> DocumentState:
        """Apply ranged or whole-text change events in order, then re-index."""
        previous = self.documents.get(uri)
        document = previous.document if previous else TextDocument(uri, source="")
        for change in changes:
            document.apply_change(change)
        return self._index(document)

    def _index(self, document: TextDocument) -> DocumentState:
        uri = document.uri
        state = DocumentState(document=document, index=build_index(document.source, self.registry))
        self.documents[uri] = state
        logger.debug("indexed %s: %d data, error=%s", uri, len(state.index.data), state.index.error)
        return state


ls = EmberLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.update_document(uri, params.text_document.text or "")
    ls.publish_diagnostics(uri, diagnostics_for(state.index))


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    state = ls.apply_changes(uri, params.content_changes)
    ls.publish_diagnostics(uri, diagnostics_for(state.index))


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def _span(datum: Datum) -> Range:
    return Range(
        start=Position(line=datum.start[0], character=datum.start[1]),
        end=Position(line=datum.end[0], character=datum.end[1]),
    )


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    err = idx.error
    if err is None:
        return []
    return [
        Diagnostic(
            range=_mk_range(err.line, err.column),
            message=err.message,
            severity=DiagnosticSeverity.Error,
            source=SOURCE,
            code=err.status,
        )
    ]


# --- Hover ---
def hover_for(idx: DocumentIndex, pos: Position) -> Optional[Hover]:
    datum = datum_at(idx, pos.line, pos.character)
    if datum is None:
        return None
    return Hover(
        contents=MarkupContent(kind=MarkupKind.PlainText, value=describe(datum.value)),
        range=_span(datum),
    )


@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return hover_for(state.index, params.position)


# --- Document Symbols ---
def _symbol_kind(value) -> SymbolKind:
    if isinstance(value, Fixnum):
        return SymbolKind.Number
    if isinstance(value, Boolean):
        return SymbolKind.Boolean
    if isinstance(value, (Character, String)):
        return SymbolKind.String
    return SymbolKind.Array


def symbols_for(idx: DocumentIndex) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for datum in idx.data:
        rng = _span(datum)
        symbols.append(
            DocumentSymbol(
                name=label(datum.value),
                kind=_symbol_kind(datum.value),
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature("textDocument/documentSymbol")
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return symbols_for(state.index)


if __name__ == "__main__":
    # Run the language server over stdio
    ls.start_io()
