"""
lexshift - rule-based inflection and text utilities

Pluralize and singularize English words, convert identifiers between
CamelCase, snake_case, dashed, human and table/class forms, and work with
plain text by code point (squish, truncate, indent, strip_heredoc).
"""

__version__ = "0.1.0"

from .errors import ConfigurationError, InflectionError, InvalidRuleError
from .inflection import (
    InflectionEngine,
    Inflections,
    camelize,
    classify,
    configure,
    dasherize,
    deconstantize,
    default_engine,
    demodulize,
    foreign_key,
    humanize,
    load_inflections,
    ordinal,
    ordinalize,
    parameterize,
    pluralize,
    singularize,
    tableize,
    titleize,
    transliterate,
    underscore,
    upcase_first,
)
from .text import (
    at,
    exclude,
    first,
    from_,
    indent,
    indent_or_none,
    inquiry,
    is_utf8,
    last,
    remove,
    squish,
    strip_heredoc,
    to,
    truncate,
)

__all__ = [
    "__version__",
    "InflectionError",
    "InvalidRuleError",
    "ConfigurationError",
    "InflectionEngine",
    "Inflections",
    "default_engine",
    "configure",
    "load_inflections",
    "pluralize",
    "singularize",
    "camelize",
    "underscore",
    "dasherize",
    "humanize",
    "titleize",
    "tableize",
    "classify",
    "foreign_key",
    "demodulize",
    "deconstantize",
    "parameterize",
    "transliterate",
    "upcase_first",
    "ordinal",
    "ordinalize",
    "squish",
    "truncate",
    "remove",
    "exclude",
    "at",
    "from_",
    "to",
    "first",
    "last",
    "strip_heredoc",
    "indent",
    "indent_or_none",
    "inquiry",
    "is_utf8",
]
