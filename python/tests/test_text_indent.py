"""
Tests for lexshift.text.indent and lexshift.text.strip.
"""

import pytest

from lexshift.text import indent, indent_or_none, strip_heredoc


class TestStripHeredoc:
    """Tests for strip_heredoc()."""

    def test_empty_string(self):
        assert strip_heredoc("") == ""

    def test_single_line(self):
        assert strip_heredoc("x") == "x"
        assert strip_heredoc("    x") == "x"

    def test_no_margin(self):
        assert strip_heredoc("foo\nbar") == "foo\nbar"
        assert strip_heredoc("foo\n  bar") == "foo\n  bar"

    def test_indented_heredoc(self):
        text = "      foo\n        bar\n      baz\n"
        assert strip_heredoc(text) == "foo\n  bar\nbaz\n"

    def test_blank_lines(self, heredoc):
        assert strip_heredoc(heredoc) == "foo\n  bar\n\nbaz\n"

    def test_whitespace_only_lines_lose_at_most_the_margin(self):
        assert strip_heredoc("    foo\n  \n      bar") == "foo\n\n  bar"
        assert strip_heredoc("  foo\n      \n  bar") == "foo\n    \nbar"

    def test_all_blank_lines(self):
        assert strip_heredoc("\n\n") == "\n\n"
        assert strip_heredoc("   \n  \n") == "   \n  \n"

    def test_tabs(self):
        assert strip_heredoc("\tfoo\n\t\tbar") == "foo\n\tbar"

    def test_idempotent(self, heredoc):
        once = strip_heredoc(heredoc)
        assert strip_heredoc(once) == once


class TestIndent:
    """Tests for indent() and indent_or_none()."""

    @pytest.fixture
    def method_source(self):
        return "  def some_method(x, y)\n    some_code\n  end\n"

    def test_newline_only_strings_are_not_indented(self):
        for text in ("", "\n", "\n" * 7):
            assert indent_or_none(text, 8) is None
            assert indent(text, 8) == text
            assert indent(text, 1, "\t") == text

    def test_infers_spaces(self):
        assert indent("foo\n  bar", 4) == "    foo\n      bar"

    def test_infers_tabs(self):
        assert indent("foo\n\t\bar", 1) == "\tfoo\n\t\t\bar"

    def test_falls_back_to_spaces(self):
        assert indent("foo\nbar\nbaz", 3) == "   foo\n   bar\n   baz"

    def test_explicit_indent_string(self, method_source):
        assert indent(method_source, 4, ".") == (
            "....  def some_method(x, y)\n....    some_code\n....  end\n"
        )

    def test_multi_character_indent_string(self):
        source = "&nbsp;&nbsp;def f\n&nbsp;&nbsp;end\n"
        assert indent(source, 2, "&nbsp;") == (
            "&nbsp;&nbsp;&nbsp;&nbsp;def f\n&nbsp;&nbsp;&nbsp;&nbsp;end\n"
        )

    def test_blank_lines_untouched_by_default(self):
        assert indent("foo\n\nbar", 1) == " foo\n\n bar"

    def test_indent_empty_lines(self):
        assert indent("foo\n\nbar", 1, None, True) == " foo\n \n bar"
        assert indent("foo\n\nbar", 2, indent_empty_lines=True) == "  foo\n  \n  bar"

    def test_trailing_newline_is_not_a_line(self):
        assert indent("foo\n", 2, indent_empty_lines=True) == "  foo\n"

    def test_indent_or_none_returns_copy_on_change(self):
        assert indent_or_none("foo", 2) == "  foo"
