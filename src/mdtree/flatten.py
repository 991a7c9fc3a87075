"""Reduce an element tree to plain text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from mdtree.elements import Element
from mdtree.parser import parse


def spread(elements: Iterable[Element]) -> Iterator[Element]:
    """Yield the leaves of *elements* depth-first, in reading order.

    A container's own text is skipped in favour of its children, which hold
    the same content with any nested markup already stripped.
    """
    for element in elements:
        if element.children:
            yield from spread(element.children)
        else:
            yield element


def clear(source: str | None) -> str | None:
    """Return *source* with all recognised markup removed, or None if empty."""
    if not source:
        return None
    return "".join(leaf.text for leaf in spread(parse(source).elements))
