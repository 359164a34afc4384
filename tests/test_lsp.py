import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    Position,
    Range,
    SymbolKind,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentContentChangeEvent_Type2,
)

from ember.errors import StructuralError
from ember.types.fixnum import Fixnum
from ember_lsp.indexer import build_index, datum_at, describe, label
from ember_lsp.server import EmberLanguageServer, diagnostics_for, hover_for, symbols_for

URI = "file:///tmp/sample.scm"


@pytest.fixture
def server():
    ls = EmberLanguageServer()
    yield ls
    ls.loop.close()


def test_index_records_spans():
    idx = build_index("1 (2 . 3)\n#t")
    assert idx.error is None
    assert [d.start for d in idx.data] == [(0, 0), (0, 2), (1, 0)]
    assert [d.end for d in idx.data] == [(0, 1), (0, 9), (1, 2)]
    assert idx.data[0].value == Fixnum(1)


def test_index_stops_at_first_error():
    idx = build_index("1\n(2 .3)\n4")
    assert len(idx.data) == 1
    assert isinstance(idx.error, StructuralError)
    assert (idx.error.line, idx.error.column) == (1, 4)


def test_index_of_long_document():
    text = "".join(f"{i}\n" for i in range(20_000)) + "(1 .2)"
    idx = build_index(text)
    assert len(idx.data) == 20_000
    assert idx.data[-1].start == (19_999, 0)
    assert idx.data[-1].end == (19_999, 5)
    assert (idx.error.line, idx.error.column) == (20_000, 4)


def test_index_of_blank_document():
    idx = build_index("; nothing\n")
    assert idx.data == []
    assert idx.error is None


def test_datum_at():
    idx = build_index("1 (2 . 3)")
    assert datum_at(idx, 0, 5).start == (0, 2)
    assert datum_at(idx, 0, 1) is None
    assert datum_at(idx, 3, 0) is None


def test_describe_and_label():
    idx = build_index('(1 2) "' + "x" * 60 + '"')
    assert describe(idx.data[0].value) == "Pair: (1 2)"
    long_label = label(idx.data[1].value)
    assert len(long_label) == 40
    assert long_label.endswith("...")


def test_diagnostics():
    assert diagnostics_for(build_index("(1 2)")) == []
    (diag,) = diagnostics_for(build_index("1\n(2 .3)"))
    assert diag.range.start.line == 1
    assert diag.range.start.character == 4
    assert diag.message == "Dot not followed by delimiter"
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.code == 3


def test_hover():
    idx = build_index("1 (2 . 3)")
    hover = hover_for(idx, Position(line=0, character=3))
    assert hover.contents.value == "Pair: (2 . 3)"
    assert hover_for(idx, Position(line=0, character=1)) is None


def test_document_symbols():
    symbols = symbols_for(build_index('42 #t "s" (1)'))
    assert [s.name for s in symbols] == ["42", "#t", '"s"', "(1)"]
    assert [s.kind for s in symbols] == [
        SymbolKind.Number, SymbolKind.Boolean, SymbolKind.String, SymbolKind.Array,
    ]


def test_incremental_change_is_merged_into_document(server):
    server.update_document(URI, "(1 2)\n(3 4)\n")
    insert = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=1, character=4), end=Position(line=1, character=4)),
        text="5",
    )
    state = server.apply_changes(URI, [insert])
    assert state.text == "(1 2)\n(3 45)\n"
    assert [label(d.value) for d in state.index.data] == ["(1 2)", "(3 45)"]
    assert server.documents[URI] is state


def test_changes_apply_in_order(server):
    server.update_document(URI, "(1 2)")
    replace = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=0, character=1), end=Position(line=0, character=2)),
        text="7",
    )
    append = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=0, character=5), end=Position(line=0, character=5)),
        text=" #t",
    )
    state = server.apply_changes(URI, [replace, append])
    assert state.text == "(7 2) #t"
    assert len(state.index.data) == 2


def test_whole_text_change_replaces_document(server):
    server.update_document(URI, "(1 2)\n(3 4)\n")
    state = server.apply_changes(URI, [TextDocumentContentChangeEvent_Type2(text="(1 .2)")])
    assert state.text == "(1 .2)"
    assert state.index.data == []
    assert diagnostics_for(state.index)[0].message == "Dot not followed by delimiter"
