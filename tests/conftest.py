"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from mdtree.elements import Element, MarkdownDocument
from mdtree.parser import parse


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a MarkdownDocument."""

    def _parse(source: str) -> MarkdownDocument:
        return parse(source)

    return _parse


def assert_kinds(elements: tuple[Element, ...], expected: list[type]) -> None:
    """Assert that the element variants match the expected list."""
    actual = [type(e) for e in elements]
    assert actual == expected, f"Expected {expected}, got {actual}"


def leaf_text(elements: tuple[Element, ...]) -> str:
    """Concatenate leaf text depth-first."""
    parts: list[str] = []
    for e in elements:
        if e.children:
            parts.append(leaf_text(e.children))
        else:
            parts.append(e.text)
    return "".join(parts)
