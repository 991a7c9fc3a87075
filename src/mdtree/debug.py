"""--debug element tree dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from mdtree.elements import (
    BlockCode,
    Element,
    Header,
    Link,
    MarkdownDocument,
    OrderedListItem,
    Text,
)


def dump_tree(doc: MarkdownDocument, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable element tree to *file*."""
    file.write("MarkdownDocument\n")
    for element in doc.elements:
        _dump_element(element, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _label(element: Element) -> str:
    name = type(element).__name__
    if isinstance(element, Text):
        return f"Text({element.text!r})"
    if isinstance(element, Header):
        return f"Header level={element.level} {element.text!r}"
    if isinstance(element, OrderedListItem):
        return f"OrderedListItem {element.order}"
    if isinstance(element, Link):
        return f"Link {element.text!r} -> {element.url}"
    if isinstance(element, BlockCode):
        return f"BlockCode {element.line_type.name} {element.text!r}"
    if not element.children:
        return f"{name}({element.text!r})"
    return name


def _dump_element(element: Element, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{_label(element)}\n")
    for child in element.children:
        _dump_element(child, depth + 1, f)
