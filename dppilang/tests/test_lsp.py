"""
Tests for the DPPI language server helpers.
"""
from lsprotocol.types import (
    DiagnosticSeverity,
    DocumentSymbolParams,
    SymbolKind,
    TextDocumentIdentifier,
)

from dppilang.lsp import (
    DppiLanguageServer,
    diagnose,
    document_symbols,
    index_symbols,
)

URI = "file:///tmp/example.dppi"


def test_valid_source_has_no_diagnostics():
    assert diagnose("a = 1\nscope { b = a }") == []


def test_unexpected_token_diagnostic():
    [diagnostic] = diagnose("a = 1\nscope 5")
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.range.start.line == 1
    assert diagnostic.range.start.character == 6
    assert diagnostic.range.end.character == 7
    assert "Unexpected token" in diagnostic.message


def test_range_error_diagnostic():
    [diagnostic] = diagnose("\n\nx = 99999999999999999999")
    assert diagnostic.range.start.line == 2


def test_symbols_are_top_level_assignments():
    symbols = index_symbols(URI, "a = 1\nscope {\n  b = 2\n}\n  c = a\n")
    assert [(s.name, s.line, s.column, s.detail) for s in symbols] == [
        ("a", 0, 0, "a = 1"),
        ("c", 4, 2, "c = a"),
    ]
    assert all(s.kind == SymbolKind.Variable for s in symbols)


def test_update_index_keeps_symbols_on_error():
    server = DppiLanguageServer()
    assert server.update_index(URI, "a = 1") == []
    assert server.global_symbols["a"][0].uri == URI

    diagnostics = server.update_index(URI, "a = ")
    assert len(diagnostics) == 1
    assert [s.name for s in server.symbols_by_uri[URI]] == ["a"]


def test_first_binding_wins():
    server = DppiLanguageServer()
    server.update_index("file:///tmp/first.dppi", "x = 1")
    server.update_index("file:///tmp/second.dppi", "y = 0\nx = 2")
    server.update_index("file:///tmp/first.dppi", "z = 0\nx = 3")

    sym = server.lookup("x")
    assert sym.uri == "file:///tmp/first.dppi"
    assert sym.detail == "x = 3"
    assert server.lookup("missing") is None


def test_definition_and_hover():
    server = DppiLanguageServer()
    server.update_index(URI, "a = 1\n  b = a")

    location = server.definition_for("b")
    assert location.uri == URI
    assert (location.range.start.line, location.range.start.character) == (1, 2)
    assert location.range.end.character == 3

    assert server.hover_for("b").contents.value == "b = a"
    assert server.definition_for("c") is None
    assert server.hover_for("c") is None


def test_index_workspace(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "main.dppi").write_text("a = 1\n", encoding="utf-8")
    (tmp_path / "nested" / "lib.dppi").write_text("b = 2\n", encoding="utf-8")
    (tmp_path / "bad.dppi").write_text("scope 5\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("c = 3\n", encoding="utf-8")
    opened = (tmp_path / "main.dppi").as_uri()

    server = DppiLanguageServer()
    server.update_index(opened, "a = 9\n")
    server.index_workspace(str(tmp_path))

    assert server.indexed_workspace
    assert server.lookup("a").detail == "a = 9"
    assert server.lookup("b").uri == (tmp_path / "nested" / "lib.dppi").as_uri()
    assert server.lookup("c") is None
    assert (tmp_path / "bad.dppi").as_uri() not in server.symbols_by_uri


def test_index_workspace_without_root():
    server = DppiLanguageServer()
    server.index_workspace(None)
    assert server.indexed_workspace
    assert server.symbols_by_uri == {}


def test_document_symbols():
    server = DppiLanguageServer()
    server.update_index(URI, "a = 1\nscope { b = 2 }\ncount = a\n")
    params = DocumentSymbolParams(text_document=TextDocumentIdentifier(uri=URI))

    symbols = document_symbols(server, params)
    assert [(s.name, s.detail) for s in symbols] == [("a", "a = 1"), ("count", "count = a")]
    count = symbols[1]
    assert count.kind == SymbolKind.Variable
    assert (count.range.start.line, count.range.start.character) == (2, 0)
    assert count.range.end.character == 5
    assert count.selection_range == count.range

    other = DocumentSymbolParams(text_document=TextDocumentIdentifier(uri="file:///tmp/none.dppi"))
    assert document_symbols(server, other) == []
