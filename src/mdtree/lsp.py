"""Minimal LSP server for mdtree: document outline only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    DocumentSymbol,
    DocumentSymbolParams,
    Position,
    Range,
    SymbolKind,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from mdtree import __version__
from mdtree.elements import BlockCode, BlockCodeType, Element, Header
from mdtree.parser import parse
from mdtree.positions import Position as SourcePosition
from mdtree.positions import Span

server = LanguageServer(
    "mdtree-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _lsp_position(pos: SourcePosition) -> Position:
    # 1-based source positions -> 0-based LSP positions
    return Position(line=pos.line - 1, character=pos.column - 1)


def _lsp_range(span: Span) -> Range:
    return Range(start=_lsp_position(span.start), end=_lsp_position(span.end))


def _code_symbol(lines: list[BlockCode]) -> DocumentSymbol | None:
    first, last = lines[0].span, lines[-1].span
    if first is None or last is None:
        return None
    rng = Range(start=_lsp_position(first.start), end=_lsp_position(last.end))
    return DocumentSymbol(
        name="code block",
        detail=lines[0].text.strip(),
        kind=SymbolKind.Namespace,
        range=rng,
        selection_range=rng,
        children=[],
    )


def outline(elements: tuple[Element, ...]) -> list[DocumentSymbol]:
    """Build a header/code-block outline from top-level elements.

    Headers nest under the nearest preceding header of a lower level; code
    blocks nest under the current header.
    """
    roots: list[DocumentSymbol] = []
    stack: list[tuple[int, DocumentSymbol]] = []
    pending: list[BlockCode] = []

    def attach(symbol: DocumentSymbol) -> None:
        if stack:
            stack[-1][1].children.append(symbol)
        else:
            roots.append(symbol)

    for element in elements:
        if isinstance(element, BlockCode):
            pending.append(element)
            if element.line_type in (BlockCodeType.END, BlockCodeType.SINGLE):
                symbol = _code_symbol(pending)
                if symbol is not None:
                    attach(symbol)
                pending = []
            continue

        if isinstance(element, Header) and element.span is not None:
            rng = _lsp_range(element.span)
            symbol = DocumentSymbol(
                name=element.text.strip() or "#" * element.level,
                detail=f"h{element.level}",
                kind=SymbolKind.String,
                range=rng,
                selection_range=rng,
                children=[],
            )
            while stack and stack[-1][0] >= element.level:
                stack.pop()
            attach(symbol)
            stack.append((element.level, symbol))

    return roots


def _symbols(ls: LanguageServer, uri: str) -> list[DocumentSymbol]:
    """Parse the document at *uri* and return its outline."""
    doc = ls.workspace.get_text_document(uri)
    return outline(parse(doc.source).elements)


@server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbol(ls: LanguageServer, params: DocumentSymbolParams) -> list[DocumentSymbol]:
    return _symbols(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
