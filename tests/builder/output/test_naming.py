"""
Unit tests for output file naming.
"""

import pytest

from workbook_toolkit.builder.output.naming import suggest_filename


class TestSuggestFilename:
    """Tests for suggest_filename()."""

    @pytest.mark.parametrize("title,expected", [
        ("English Grammar Practice", "english-grammar-practice.pdf"),
        ("  B2: Phrasal Verbs!! ", "b2-phrasal-verbs.pdf"),
        ("Café & Co.", "caf-co.pdf"),
    ])
    def test_suggest_when_title_then_slug(self, title, expected):
        assert suggest_filename(title) == expected

    def test_suggest_when_no_usable_characters_then_fallback(self):
        assert suggest_filename("!!!") == "workbook.pdf"

    def test_suggest_when_extension_given_then_used(self):
        assert suggest_filename("My Book", extension=".json") == "my-book.json"
