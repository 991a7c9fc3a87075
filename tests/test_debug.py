"""Test the --debug tree dump."""

from __future__ import annotations

import io

from mdtree.debug import dump_tree
from mdtree.parser import parse


def dump(source: str) -> str:
    buf = io.StringIO()
    dump_tree(parse(source), file=buf)
    return buf.getvalue()


class TestDumpTree:
    def test_empty_document(self):
        assert dump("") == "MarkdownDocument\n"

    def test_nested(self):
        assert dump("**b** x") == (
            "MarkdownDocument\n"
            "  Bold\n"
            "    Text('b')\n"
            "  Text(' x')\n"
        )

    def test_header(self):
        assert "  Header level=1 'T'\n" in dump("# T")

    def test_link(self):
        assert "  Link 'a' -> b\n" in dump("[a](b)")

    def test_ordered_list(self):
        out = dump("3. item")
        assert "  OrderedListItem 3.\n" in out
        assert "    Text('item')\n" in out

    def test_block_code(self):
        out = dump("```\na\nb\n```")
        assert "  BlockCode START 'a\\n'\n" in out
        assert "  BlockCode END 'b'\n" in out

    def test_rule(self):
        assert "  Rule(' ')\n" in dump("---")
