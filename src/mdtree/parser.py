"""Markdown parser: scans text with the combined pattern and builds an element tree."""

from __future__ import annotations

from mdtree.elements import (
    BlockCode,
    BlockCodeType,
    Bold,
    Element,
    Header,
    InlineCode,
    Italic,
    Link,
    MarkdownDocument,
    OrderedListItem,
    Quote,
    Rule,
    Strike,
    Text,
    UnorderedListItem,
)
from mdtree.patterns import (
    ELEMENTS_PATTERN,
    HEADER_MARKER,
    LINK_SHAPE,
    ORDER_MARKER,
    Group,
    matched_group,
)
from mdtree.positions import LineIndex, Span

LINE_SEPARATOR = "\n"
# Nesting depth past which inner text is kept as a plain Text leaf
MAX_DEPTH = 200


class Parser:
    """Recursive tokenize-and-dispatch parser for one source string.

    Every call to ``_find_elements`` works on its own slice of the source and
    returns freshly built nodes; the only mutable state is the current nesting
    depth, which caps recursion at ``MAX_DEPTH``.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._lines = LineIndex(source)
        self._depth = 0

    def parse(self) -> MarkdownDocument:
        return MarkdownDocument(tuple(self._find_elements(self._source, 0)))

    def _span(self, start: int, end: int) -> Span:
        return self._lines.span(start, end)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _find_elements(self, text: str, base: int) -> list[Element]:
        """Split *text* (found at offset *base* of the source) into elements."""
        elements: list[Element] = []
        cursor = 0

        while True:
            match = ELEMENTS_PATTERN.search(text, cursor)
            if match is None:
                break
            group = matched_group(match)
            if group is None:
                break
            start, end = match.span()

            # Everything before the match is plain text
            if cursor < start:
                gap = self._span(base + cursor, base + start)
                elements.append(Text(text[cursor:start], span=gap))

            elements.extend(self._dispatch(group, text, start, end, base))
            cursor = end

        if cursor < len(text):
            rest = self._span(base + cursor, base + len(text))
            elements.append(Text(text[cursor:], span=rest))

        return elements

    def _inner(self, text: str, start: int, end: int, base: int) -> tuple[str, tuple[Element, ...]]:
        """Slice text[start:end] and parse it recursively."""
        inner = text[start:end]
        if self._depth >= MAX_DEPTH:
            # Too deeply nested: keep the rest as literal text
            return inner, (Text(inner, span=self._span(base + start, base + end)),)
        self._depth += 1
        try:
            children = tuple(self._find_elements(inner, base + start))
        finally:
            self._depth -= 1
        return inner, children

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, group: Group, text: str, start: int, end: int, base: int) -> list[Element]:
        span = self._span(base + start, base + end)

        if group == Group.UNORDERED_LIST_ITEM:
            # "* " / "+ " / "- "
            inner, children = self._inner(text, start + 2, end, base)
            return [UnorderedListItem(inner, children, span)]

        if group == Group.HEADER:
            marker = HEADER_MARKER.match(text[start:end])
            assert marker is not None
            level = len(marker.group())
            return [Header(level, text[start + level + 1 : end], span=span)]

        if group == Group.QUOTE:
            inner, children = self._inner(text, start + 2, end, base)
            return [Quote(inner, children, span)]

        if group == Group.ITALIC:
            inner, children = self._inner(text, start + 1, end - 1, base)
            return [Italic(inner, children, span)]

        if group == Group.BOLD:
            inner, children = self._inner(text, start + 2, end - 2, base)
            return [Bold(inner, children, span)]

        if group == Group.STRIKE:
            inner, children = self._inner(text, start + 2, end - 2, base)
            return [Strike(inner, children, span)]

        if group == Group.RULE:
            return [Rule(span=span)]

        if group == Group.INLINE_CODE:
            inner, children = self._inner(text, start + 1, end - 1, base)
            return [InlineCode(inner, children, span)]

        if group == Group.LINK:
            shape = LINK_SHAPE.match(text[start:end])
            assert shape is not None
            title, url = shape.groups()
            return [Link(url, title, span=span)]

        if group == Group.ORDERED_LIST_ITEM:
            marker = ORDER_MARKER.match(text[start:end])
            assert marker is not None
            order = marker.group()
            inner, children = self._inner(text, start + len(order) + 1, end, base)
            return [OrderedListItem(order, inner, children, span)]

        return self._block_code(text, start, end, base)

    def _block_code(self, text: str, start: int, end: int, base: int) -> list[Element]:
        """Split a fenced block into one BlockCode element per physical line."""
        body_start = start + 3
        body_end = end - 3
        # A terminator hugging either fence belongs to the fence
        if text.startswith(LINE_SEPARATOR, body_start):
            body_start += len(LINE_SEPARATOR)
        if body_end > body_start and text.endswith(LINE_SEPARATOR, body_start, body_end):
            body_end -= len(LINE_SEPARATOR)
        body = text[body_start:body_end]

        if LINE_SEPARATOR not in body:
            span = self._span(base + body_start, base + body_end)
            return [BlockCode(BlockCodeType.SINGLE, body, span=span)]

        lines = body.split(LINE_SEPARATOR)
        last = len(lines) - 1
        blocks: list[Element] = []
        offset = base + body_start
        for index, line in enumerate(lines):
            if index == last:
                line_type = BlockCodeType.END
                content = line
            elif index == 0:
                line_type = BlockCodeType.START
                content = line + LINE_SEPARATOR
            else:
                line_type = BlockCodeType.MIDDLE
                content = line + LINE_SEPARATOR
            line_span = self._span(offset, offset + len(content))
            blocks.append(BlockCode(line_type, content, span=line_span))
            offset += len(content)
        return blocks


def parse(source: str) -> MarkdownDocument:
    """Convenience function: parse markdown text into a MarkdownDocument."""
    return Parser(source).parse()
