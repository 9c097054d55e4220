"""
Inflection table builder and frozen snapshot.

Inflections is the mutable registration surface used while configuring an
engine. Calling freeze() produces an InflectionTables snapshot that the
engine reads from; snapshots are never modified afterwards.

New rules are added at the top: a rule registered later is tried before
every rule registered earlier.

    >>> inflect = Inflections()
    >>> inflect.plural(r"^(ox)$", r"\\1en")
    >>> inflect.singular(r"^(ox)en", r"\\1")
    >>> inflect.irregular("octopus", "octopi")
    >>> inflect.uncountable("equipment")
    >>> inflect.acronym("HTML")
    >>> tables = inflect.freeze()
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from ..errors import InvalidRuleError
from .acronyms import AcronymRegistry
from .constants import (
    DEFAULT_ACRONYMS,
    DEFAULT_IRREGULARS,
    DEFAULT_PLURALS,
    DEFAULT_SINGULARS,
    DEFAULT_UNCOUNTABLES,
    SCOPES,
)
from .rules import Rule, RuleTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InflectionTables:
    """Read-only snapshot of everything the engine needs."""

    rules: RuleTable = field(default_factory=RuleTable)
    acronyms: AcronymRegistry = field(default_factory=AcronymRegistry)


def _require_word(value: object, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRuleError(f"{what} must be a non-empty string, got {value!r}")
    return value.strip()


class Inflections:
    """Mutable collection of inflection rules, acronyms and exceptions."""

    def __init__(self):
        self.plurals: list[Rule] = []
        self.singulars: list[Rule] = []
        self.humans: list[Rule] = []
        # lowercase singular -> (singular, plural)
        self.irregulars: dict[str, tuple[str, str]] = {}
        self.uncountables: set[str] = set()
        self.acronyms: dict[str, str] = {}

    @classmethod
    def from_tables(cls, tables: InflectionTables) -> "Inflections":
        """Seed a builder with the contents of an existing snapshot."""
        inflect = cls()
        inflect.plurals = list(tables.rules.plurals)
        inflect.singulars = list(tables.rules.singulars)
        inflect.humans = list(tables.rules.humans)
        inflect.irregulars = {s.lower(): (s, p) for s, p in tables.rules.irregulars}
        inflect.uncountables = set(tables.rules.uncountables)
        inflect.acronyms = dict(tables.acronyms.acronyms)
        return inflect

    def plural(self, pattern: Union[str, re.Pattern[str]], replacement: str) -> Rule:
        """Register a pluralization rule with the highest priority."""
        rule = Rule.compile(pattern, replacement)
        self.plurals.insert(0, rule)
        logger.debug(f"Added plural rule {rule.pattern.pattern!r} -> {replacement!r}")
        return rule

    def singular(self, pattern: Union[str, re.Pattern[str]], replacement: str) -> Rule:
        """Register a singularization rule with the highest priority."""
        rule = Rule.compile(pattern, replacement)
        self.singulars.insert(0, rule)
        logger.debug(f"Added singular rule {rule.pattern.pattern!r} -> {replacement!r}")
        return rule

    def human(self, pattern: Union[str, re.Pattern[str]], replacement: str) -> Rule:
        """
        Register a rule applied by humanize() before its default processing.

        Examples:
            >>> inflect.human(r"_cnt$", "_count")
            >>> inflect.human("legacy_col_person_name", "Name")
        """
        rule = Rule.compile(pattern, replacement)
        self.humans.insert(0, rule)
        logger.debug(f"Added human rule {rule.pattern.pattern!r} -> {replacement!r}")
        return rule

    def irregular(self, singular: str, plural: str) -> None:
        """
        Register an irregular singular/plural pair.

        Both words stop being uncountable. Any earlier pair that used either
        word is replaced.
        """
        singular = _require_word(singular, "Irregular singular")
        plural = _require_word(plural, "Irregular plural")

        self.uncountables.discard(singular.lower())
        self.uncountables.discard(plural.lower())

        stale = [
            key for key, (s, p) in self.irregulars.items()
            if p.lower() == plural.lower() or s.lower() == plural.lower()
        ]
        for key in stale:
            del self.irregulars[key]

        self.irregulars[singular.lower()] = (singular, plural)
        logger.debug(f"Added irregular {singular!r} <-> {plural!r}")

    def uncountable(self, *words: Union[str, Iterable[str]]) -> None:
        """
        Register words that are the same in singular and plural.

        Accepts individual words or iterables of words:

            >>> inflect.uncountable("money")
            >>> inflect.uncountable("fish", "sheep")
            >>> inflect.uncountable(["rice", "jeans"])
        """
        for item in words:
            if isinstance(item, str):
                items = [item]
            elif isinstance(item, Iterable):
                items = list(item)
            else:
                raise InvalidRuleError(f"Uncountable must be a word or an iterable of words, got {item!r}")
            for word in items:
                self.uncountables.add(_require_word(word, "Uncountable word").lower())
        logger.debug(f"Uncountables now: {len(self.uncountables)} words")

    def acronym(self, word: str, key: Optional[str] = None) -> None:
        """
        Register an acronym by its display form.

        Args:
            word: Display form, e.g. "HTML" or "RESTful"
            key: Lookup key, the display form in any casing (default: word.lower())

        Raises:
            InvalidRuleError: If key is not word in lowercase
        """
        word = _require_word(word, "Acronym")
        if not re.fullmatch(r"\w+", word):
            raise InvalidRuleError(f"Acronym must be a single word, got {word!r}")
        key = word.lower() if key is None else _require_word(key, "Acronym key").lower()
        if key != word.lower():
            raise InvalidRuleError(f"Acronym key {key!r} must be {word!r} in lowercase")
        self.acronyms[key] = word
        logger.debug(f"Added acronym {key!r} -> {word!r}")

    def clear(self, scope: str = "all") -> None:
        """
        Clear one scope or all of them.

        Args:
            scope: One of "plurals", "singulars", "irregulars", "uncountables",
                "acronyms", "humans" or "all"
        """
        if scope == "all":
            for name in SCOPES:
                self.clear(name)
            return
        if scope not in SCOPES:
            raise InvalidRuleError(f"Unknown inflection scope {scope!r} (expected one of {', '.join(SCOPES)}, all)")
        getattr(self, scope).clear()

    def freeze(self) -> InflectionTables:
        """Build an immutable snapshot of the current registrations."""
        rules = RuleTable(
            plurals=tuple(self.plurals),
            singulars=tuple(self.singulars),
            humans=tuple(self.humans),
            irregulars=tuple(self.irregulars.values()),
            uncountables=frozenset(self.uncountables),
        )
        return InflectionTables(rules=rules, acronyms=AcronymRegistry(dict(self.acronyms)))


def english_inflections() -> Inflections:
    """Return a builder loaded with the default English tables."""
    inflect = Inflections()
    for pattern, replacement in DEFAULT_PLURALS:
        inflect.plural(pattern, replacement)
    for pattern, replacement in DEFAULT_SINGULARS:
        inflect.singular(pattern, replacement)
    for singular, plural in DEFAULT_IRREGULARS:
        inflect.irregular(singular, plural)
    inflect.uncountable(DEFAULT_UNCOUNTABLES)
    for word in DEFAULT_ACRONYMS:
        inflect.acronym(word)
    return inflect


def default_tables() -> InflectionTables:
    """Return a fresh snapshot of the default English tables."""
    return english_inflections().freeze()
