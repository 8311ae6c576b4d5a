"""
DPPI Language Server entry point.

This server provides basic language features for DPPI source files using
`pygls`. It reuses the DPPI lexer and parser to report syntax errors as
diagnostics and to build a symbol index of top-level assignments
supporting definition lookup, hover information, and document symbols.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from dppilang.exceptions import ParserError, UnexpectedToken
from dppilang.lexer import Lexer
from dppilang.parser import Parser
from dppilang.tokens import TokenKind


@dataclass
class DppiSymbol:
    """Represents a top-level binding in a DPPI file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str

    @property
    def range(self) -> Range:
        return Range(
            Position(self.line, self.column),
            Position(self.line, self.column + len(self.name)),
        )


def diagnose(text: str) -> List[Diagnostic]:
    """Parse ``text`` and return a diagnostic for its first error, if any."""
    try:
        Parser(text).parse_program()
    except ParserError as e:
        if isinstance(e, UnexpectedToken):
            line = e.token.line - 1
            start = e.token.column - 1
            end = start + max(len(e.token.literal), 1)
        else:
            line, start, end = (e.line or 1) - 1, 0, 0
        rng = Range(Position(line, start), Position(line, end))
        return [
            Diagnostic(
                range=rng,
                message=str(e),
                severity=DiagnosticSeverity.Error,
                source="dppi",
            )
        ]
    return []


def index_symbols(uri: str, text: str) -> List[DppiSymbol]:
    """Return the top-level assignments in ``text``, in source order.

    ``text`` is expected to parse; nesting is tracked by brace depth so
    assignments inside ``scope`` blocks are left out.
    """
    symbols: List[DppiSymbol] = []
    depth = 0
    tokens = list(Lexer(text))
    for i, tok in enumerate(tokens):
        if tok.kind == TokenKind.LBRACE:
            depth += 1
        elif tok.kind == TokenKind.RBRACE:
            depth -= 1
        elif (
            depth == 0
            and tok.kind == TokenKind.ID
            and i + 2 < len(tokens)
            and tokens[i + 1].kind == TokenKind.ASSIGN
        ):
            detail = f"{tok.literal} = {tokens[i + 2].literal}"
            symbols.append(
                DppiSymbol(
                    tok.literal, SymbolKind.Variable, uri,
                    tok.line - 1, tok.column - 1, detail,
                )
            )
    return symbols


class DppiLanguageServer(LanguageServer):
    """Language server for DPPI source files."""

    def __init__(self) -> None:
        super().__init__("dppi-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[DppiSymbol]] = {}
        self.global_symbols: Dict[str, List[DppiSymbol]] = {}
        self.indexed_workspace = False

    def index_workspace(self, root: Optional[str]) -> None:
        """Parse all `.dppi` files under ``root``.

        Documents already indexed (opened in the editor) are left alone.
        """
        if root:
            for path in sorted(Path(root).rglob("*.dppi")):
                uri = path.as_uri()
                if uri in self.symbols_by_uri:
                    continue
                try:
                    text = path.read_text(encoding="utf-8")
                except OSError:
                    continue
                self.update_index(uri, text)
        self.indexed_workspace = True

    def ensure_workspace_indexed(self) -> None:
        if not self.indexed_workspace:
            self.index_workspace(self.workspace.root_path)

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text`` and update symbol index for ``uri``.

        A document that fails to parse keeps its previous symbols.

        Returns:
            The diagnostics for ``text``.
        """
        diagnostics = diagnose(text)
        if not diagnostics:
            self.symbols_by_uri[uri] = index_symbols(uri, text)
            self._rebuild_global_index()
        return diagnostics

    def lookup(self, word: str) -> Optional[DppiSymbol]:
        """Return the first binding of ``word`` across indexed documents.

        Documents count in the order they were first indexed.
        """
        matches = self.global_symbols.get(word)
        return matches[0] if matches else None

    def definition_for(self, word: str) -> Optional[Location]:
        sym = self.lookup(word)
        if sym is None:
            return None
        return Location(uri=sym.uri, range=sym.range)

    def hover_for(self, word: str) -> Optional[Hover]:
        sym = self.lookup(word)
        if sym is None:
            return None
        contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
        return Hover(contents=contents, range=sym.range)

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)


lang_server = DppiLanguageServer()


def _refresh(ls: DppiLanguageServer, uri: str, text: str) -> None:
    ls.publish_diagnostics(uri, ls.update_index(uri, text))


def _word_under_cursor(ls: DppiLanguageServer, params) -> str:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.ensure_workspace_indexed()
    return doc.word_at_position(params.position)


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: DppiLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    _refresh(ls, params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: DppiLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    _refresh(ls, doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: DppiLanguageServer, params: DefinitionParams) -> Optional[Location]:
    """Return the definition location for the symbol under the cursor."""
    word = _word_under_cursor(ls, params)
    return ls.definition_for(word) if word else None


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: DppiLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    word = _word_under_cursor(ls, params)
    return ls.hover_for(word) if word else None


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: DppiLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    return [
        DocumentSymbol(
            name=sym.name,
            kind=sym.kind,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in symbols
    ]


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
