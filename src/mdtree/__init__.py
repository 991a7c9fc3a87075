"""Parser for a small markdown dialect into a typed element tree."""

from __future__ import annotations

from mdtree.elements import MarkdownDocument
from mdtree.flatten import clear
from mdtree.parser import parse

__version__ = "0.1.0"

__all__ = ["MarkdownDocument", "clear", "parse"]
