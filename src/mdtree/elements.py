"""Element node types for parsed markdown documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from mdtree.positions import Span


class BlockCodeType(Enum):
    """Where a fenced code line sits within its block."""

    START = auto()
    MIDDLE = auto()
    END = auto()
    SINGLE = auto()


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text run."""

    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Header:
    """`#`-prefixed header line; content is kept as-is."""

    level: int
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Quote:
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Bold:
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Italic:
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Strike:
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class InlineCode:
    """Backtick-delimited code; renderers show `text` verbatim."""

    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class UnorderedListItem:
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class OrderedListItem:
    """Numbered list item; `order` is the literal marker, e.g. ``"1."``."""

    order: str
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Link:
    """Inline link; `text` is the title."""

    url: str
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Rule:
    """Horizontal rule. The single-space text gives renderers something to style."""

    text: str = " "
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class BlockCode:
    """One physical line of a fenced code block."""

    line_type: BlockCodeType
    text: str
    children: tuple[Element, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


Element = (
    Text
    | Header
    | Quote
    | Bold
    | Italic
    | Strike
    | InlineCode
    | UnorderedListItem
    | OrderedListItem
    | Link
    | Rule
    | BlockCode
)


@dataclass(frozen=True, slots=True)
class MarkdownDocument:
    """Root of a parsed document: top-level elements in reading order."""

    elements: tuple[Element, ...] = ()
