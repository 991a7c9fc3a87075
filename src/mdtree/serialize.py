"""JSON-ready dictionaries for element trees.

Renderers outside this package consume the tree through this schema: every
element becomes ``{"type": ..., "text": ..., "children": [...]}`` plus its
variant fields (``level``, ``order``, ``url``, ``line_type``) and, when known,
its source ``span``.
"""

from __future__ import annotations

import json
import re
from typing import Any

from mdtree.elements import (
    BlockCode,
    Element,
    Header,
    Link,
    MarkdownDocument,
    OrderedListItem,
)
from mdtree.positions import Position, Span

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def type_name(element: Element) -> str:
    """Return the snake_case variant name, e.g. ``ordered_list_item``."""
    return _CAMEL_BOUNDARY.sub("_", type(element).__name__).lower()


def _position_to_dict(position: Position) -> dict[str, int]:
    return {"line": position.line, "column": position.column, "offset": position.offset}


def _span_to_dict(span: Span) -> dict[str, Any]:
    return {"start": _position_to_dict(span.start), "end": _position_to_dict(span.end)}


def to_dict(element: Element, *, include_spans: bool = True) -> dict[str, Any]:
    """Serialize one element and its children."""
    result: dict[str, Any] = {"type": type_name(element), "text": element.text}

    if isinstance(element, Header):
        result["level"] = element.level
    elif isinstance(element, OrderedListItem):
        result["order"] = element.order
    elif isinstance(element, Link):
        result["url"] = element.url
    elif isinstance(element, BlockCode):
        result["line_type"] = element.line_type.name

    result["children"] = [to_dict(c, include_spans=include_spans) for c in element.children]
    if include_spans and element.span is not None:
        result["span"] = _span_to_dict(element.span)
    return result


def document_to_dict(doc: MarkdownDocument, *, include_spans: bool = True) -> dict[str, Any]:
    """Serialize a whole document."""
    return {
        "type": "document",
        "elements": [to_dict(e, include_spans=include_spans) for e in doc.elements],
    }


def to_json(doc: MarkdownDocument, indent: int | None = 2, *, include_spans: bool = True) -> str:
    """Serialize a document to a JSON string."""
    return json.dumps(
        document_to_dict(doc, include_spans=include_spans), indent=indent, ensure_ascii=False
    )
