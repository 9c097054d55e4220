"""
Text helpers that work on plain strings without the inflection tables.

Offsets and lengths count code points, so multibyte text is never split
inside a character.
"""

from .access import Position, at, first, from_, last, to
from .filters import DEFAULT_OMISSION, exclude, remove, squish, truncate
from .indent import indent, indent_or_none
from .inquiry import StringInquirer, inquiry
from .multibyte import is_utf8
from .strip import strip_heredoc

__all__ = [
    "Position",
    "at",
    "from_",
    "to",
    "first",
    "last",
    "squish",
    "truncate",
    "remove",
    "exclude",
    "DEFAULT_OMISSION",
    "strip_heredoc",
    "indent",
    "indent_or_none",
    "StringInquirer",
    "inquiry",
    "is_utf8",
]
