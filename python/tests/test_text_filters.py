"""
Tests for lexshift.text.filters - squish, remove, exclude and truncate.
"""

import re

from lexshift.text import exclude, remove, squish, truncate


class TestSquish:
    """Tests for squish()."""

    def test_unicode_whitespace(self):
        """Every kind of Unicode space should collapse to one ASCII space."""
        original = (
            " 　 A string surrounded by various unicode spaces,\n"
            "      with tabs(\t\t), newlines(\n\n), unicode nextlines(\u0085\u0085) "
            "and many spaces(  ).   "
        )
        expected = (
            "A string surrounded by various unicode spaces, "
            "with tabs( ), newlines( ), unicode nextlines( ) and many spaces( )."
        )
        assert squish(original) == expected

    def test_idempotent(self):
        text = "  foo \t bar\n\nbaz  "
        assert squish(squish(text)) == squish(text) == "foo bar baz"

    def test_empty_and_blank(self):
        assert squish("") == ""
        assert squish(" \n\t ") == ""


class TestRemoveExclude:
    """Tests for remove() and exclude()."""

    def test_remove_pattern(self):
        assert remove("Fast Summer", re.compile(r"Fast ")) == "Summer"

    def test_remove_several(self):
        assert remove("foo bar test", " test", "bar") == "foo "
        assert remove("Summer", "x") == "Summer"

    def test_exclude(self):
        assert exclude("foo", "o") is False
        assert exclude("foo", "p") is True


class TestTruncate:
    """Tests for truncate()."""

    def test_short_text_unchanged(self):
        assert truncate("Hello World!", 12) == "Hello World!"

    def test_default_omission(self):
        assert truncate("Hello World!!", 12) == "Hello Wor..."

    def test_custom_omission(self):
        assert truncate("Hello World!", 10, omission="[...]") == "Hello[...]"

    def test_string_separator(self):
        assert truncate("Hello Big World!", 13, omission="[...]", separator=" ") == "Hello[...]"
        assert truncate("Hello Big World!", 14, omission="[...]", separator=" ") == "Hello Big[...]"
        assert truncate("Hello Big World!", 15, omission="[...]", separator=" ") == "Hello Big[...]"

    def test_pattern_separator(self):
        separator = re.compile(r"\s")
        assert truncate("Hello Big World!", 13, omission="[...]", separator=separator) == "Hello[...]"
        assert truncate("Hello Big World!", 14, omission="[...]", separator=separator) == "Hello Big[...]"
        assert truncate("Hello Big World!", 15, omission="[...]", separator=separator) == "Hello Big[...]"

    def test_separator_not_found_cuts_plainly(self):
        assert truncate("Supercalifragilistic", 10, separator=" ") == "Superca..."

    def test_multibyte(self):
        """Cuts happen between code points, never inside one."""
        text = "아리랑 아리 아라리오"
        assert truncate(text, 10) == "아리랑 아리 ..."

    def test_omission_longer_than_length(self):
        """The result saturates at length characters."""
        assert truncate("Hello World!", 3, omission="[...]") == "[.."
        assert truncate("Hello World!", 5, omission="[...]") == "[...]"
        assert truncate("Hello World!", 0) == ""
        assert truncate("Hello World!", -4) == ""

    def test_never_exceeds_length(self):
        text = "The quick brown fox jumps over the lazy dog"
        for length in range(0, len(text) + 2):
            for separator in (None, " ", re.compile(r"\s")):
                result = truncate(text, length, separator=separator)
                assert len(result) <= max(length, 0)

    def test_returns_plain_str(self):
        class Marked(str):
            pass

        assert type(truncate(Marked("Hello World!"), 12)) is str
        assert type(truncate(Marked("Hello World!!"), 12)) is str
