"""The combined markdown pattern and its capture-group numbering."""

from __future__ import annotations

import re
from enum import IntEnum


class Group(IntEnum):
    """Capture group index of each construct; lower index wins ties."""

    UNORDERED_LIST_ITEM = 1
    HEADER = 2
    QUOTE = 3
    ITALIC = 4
    BOLD = 5
    STRIKE = 6
    RULE = 7
    INLINE_CODE = 8
    LINK = 9
    ORDERED_LIST_ITEM = 10
    BLOCK_CODE = 11


# Line constructs stop before "\r\n" as well as "\n".
UNORDERED_LIST_ITEM_GROUP = r"(^[*+-] [^\r\n]+)"
HEADER_GROUP = r"(^#{1,6} [^\r\n]+)"
QUOTE_GROUP = r"(^> [^\r\n]+)"
ITALIC_GROUP = r"((?<!\*)\*[^*].*?[^*]?\*(?!\*)|(?<!_)_[^_].*?[^_]?_(?!_))"
BOLD_GROUP = r"((?<!\*)\*{2}[^*].*?[^*]?\*{2}(?!\*)|(?<!_)_{2}[^_].*?[^_]?_{2}(?!_))"
STRIKE_GROUP = r"((?<!~)~{2}[^~].*?[^~]?~{2}(?!~))"
RULE_GROUP = r"(^[-_*]{3}(?=\r?$))"
INLINE_CODE_GROUP = r"((?<!`)`[^`\s].*?[^`\s]?`(?!`))"
LINK_GROUP = r"(\[[^\[\]]*?\]\(.+?\))"
ORDERED_LIST_ITEM_GROUP = r"(^[0-9]+\. [^\r\n]+)"
# Optional newline after the opening fence; body is lazy up to the first closing fence.
BLOCK_CODE_GROUP = r"((?<!`)`{3}\n?[^`\s][\s\S]*?`{3}(?!`))"

# Order must match Group.
MARKDOWN_GROUPS = "|".join(
    (
        UNORDERED_LIST_ITEM_GROUP,
        HEADER_GROUP,
        QUOTE_GROUP,
        ITALIC_GROUP,
        BOLD_GROUP,
        STRIKE_GROUP,
        RULE_GROUP,
        INLINE_CODE_GROUP,
        LINK_GROUP,
        ORDERED_LIST_ITEM_GROUP,
        BLOCK_CODE_GROUP,
    )
)

ELEMENTS_PATTERN = re.compile(MARKDOWN_GROUPS, re.MULTILINE)

HEADER_MARKER = re.compile(r"^#{1,6}")
ORDER_MARKER = re.compile(r"^[0-9]+\.")
LINK_SHAPE = re.compile(r"\[(.*)\]\((.*)\)")


def matched_group(match: re.Match[str]) -> Group | None:
    """Return the first capture group that participated in *match*."""
    for group in Group:
        if match.group(group) is not None:
            return group
    return None
