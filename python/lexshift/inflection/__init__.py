"""
Rule-based inflection of words and identifiers.

Pluralizes and singularizes English words, and converts identifiers between
CamelCase, underscored, dashed, human and table/class forms. The functions
exported here run on a shared default engine loaded with English tables;
build an InflectionEngine of your own for isolated configuration.
"""

from .acronyms import AcronymRegistry
from .constants import (
    DEFAULT_ACRONYMS,
    DEFAULT_IRREGULARS,
    DEFAULT_PLURALS,
    DEFAULT_SINGULARS,
    DEFAULT_UNCOUNTABLES,
    NAMESPACE_SEPARATOR,
)
from .engine import InflectionEngine, ordinal, ordinalize, transliterate, upcase_first
from .loader import apply_config, load_inflections
from .rules import Rule, RuleTable
from .tables import InflectionTables, Inflections, default_tables, english_inflections

default_engine = InflectionEngine()

configure = default_engine.configure
pluralize = default_engine.pluralize
singularize = default_engine.singularize
camelize = default_engine.camelize
underscore = default_engine.underscore
dasherize = default_engine.dasherize
humanize = default_engine.humanize
titleize = default_engine.titleize
tableize = default_engine.tableize
classify = default_engine.classify
foreign_key = default_engine.foreign_key
demodulize = default_engine.demodulize
deconstantize = default_engine.deconstantize
parameterize = default_engine.parameterize

__all__ = [
    "AcronymRegistry",
    "InflectionEngine",
    "InflectionTables",
    "Inflections",
    "Rule",
    "RuleTable",
    "default_engine",
    "default_tables",
    "english_inflections",
    "configure",
    "load_inflections",
    "apply_config",
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
    "DEFAULT_ACRONYMS",
    "DEFAULT_IRREGULARS",
    "DEFAULT_PLURALS",
    "DEFAULT_SINGULARS",
    "DEFAULT_UNCOUNTABLES",
    "NAMESPACE_SEPARATOR",
]
