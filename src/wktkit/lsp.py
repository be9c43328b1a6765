"""Minimal LSP server for WKT documents — diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from wktkit import __version__
from wktkit.errors import LexError, ParseError, UnknownGeometryTypeError
from wktkit.parser import parse_all
from wktkit.tokens import Span

server = LanguageServer(
    "wktkit-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _range(span: Span) -> Range:
    """Convert a 1-based source span to a 0-based LSP range (at least one character)."""
    start = Position(line=span.start.line - 1, character=span.start.column - 1)
    end = Position(line=span.end.line - 1, character=span.end.column - 1)
    if end == start:
        end = Position(line=start.line, character=start.character + 1)
    return Range(start=start, end=end)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        parse_all(doc.source)
    except LexError as exc:
        diagnostics.append(
            Diagnostic(
                range=_range(Span(exc.position, exc.position)),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="wktkit",
            )
        )
    except ParseError as exc:
        diagnostics.append(
            Diagnostic(
                range=_range(exc.span),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="wktkit",
            )
        )
    except UnknownGeometryTypeError as exc:
        diagnostics.append(
            Diagnostic(
                range=_range(exc.span),
                message=exc.message,
                severity=DiagnosticSeverity.Warning,
                source="wktkit",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
