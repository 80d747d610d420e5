"""Tests for docview.docs.layout."""

import logging

from docview.docs.decoder import decode_package
from docview.docs.layout import page_blocks
from docview.types import ModuleDoc, ValueDoc


def _summary(blocks):
    return [(b.kind, b.text if b.kind == "MARKDOWN" else b.entry.name) for b in blocks]


class TestPageBlocks:
    """Tests for page_blocks()."""

    def test_follows_docs_lines(self, sample_docs):
        (module,) = decode_package(sample_docs)
        assert _summary(page_blocks(module)) == [
            ("MARKDOWN", "Shapes on a plane.\n\n# Points"),
            ("ENTRY", "Point"),
            ("ENTRY", "origin"),
            ("MARKDOWN", "# Operators"),
            ("ENTRY", "<+>"),
            ("ENTRY", "Shape"),
        ]

    def test_unlisted_entries_sorted_at_end(self):
        module = ModuleDoc("M", "", values=[ValueDoc("b", "", "Int"), ValueDoc("a", "", "Int")])
        assert _summary(page_blocks(module)) == [("ENTRY", "a"), ("ENTRY", "b")]

    def test_repeated_names_are_placed_once(self):
        module = ModuleDoc("M", "@docs a, a\n@docs a", values=[ValueDoc("a", "", "Int")])
        assert _summary(page_blocks(module)) == [("ENTRY", "a")]

    def test_unknown_names_are_logged(self, caplog):
        module = ModuleDoc("M", "@docs missing, a", values=[ValueDoc("a", "", "Int")])
        with caplog.at_level(logging.WARNING, logger="docview.docs.layout"):
            blocks = page_blocks(module)
        assert _summary(blocks) == [("ENTRY", "a")]
        assert "missing" in caplog.text
