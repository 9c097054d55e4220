"""
Pattern/replacement rules and the table that applies them.

A RuleTable is an immutable snapshot of:
- plural and singular rules, stored highest priority first
- irregular (singular, plural) pairs
- uncountable words
- "human" rules used by humanize()

Lookup order for pluralize/singularize:
1. uncountable words (identity)
2. irregular pairs (case-insensitive, matched at the end of the word)
3. rules, newest first; the first rule that matches wins
4. no match: the word is returned unchanged
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..errors import InvalidRuleError

_GROUP_REFERENCE = re.compile(r"\\(\d+)|\\g<([^>]+)>")


def _check_replacement(pattern: re.Pattern[str], replacement: str) -> None:
    for match in _GROUP_REFERENCE.finditer(replacement):
        number, name = match.groups()
        if number is not None:
            valid = int(number) <= pattern.groups
        elif name.isdigit():
            valid = int(name) <= pattern.groups
        else:
            valid = name in pattern.groupindex
        if not valid:
            raise InvalidRuleError(
                f"Replacement {replacement!r} references missing group "
                f"{match.group(0)!r} in pattern {pattern.pattern!r}"
            )


@dataclass(frozen=True)
class Rule:
    """A compiled (pattern, replacement) pair."""

    pattern: re.Pattern[str]
    replacement: str

    @classmethod
    def compile(cls, pattern: Union[str, re.Pattern[str]], replacement: str) -> "Rule":
        """
        Build a rule, validating it immediately.

        String patterns are compiled case-insensitively. Precompiled patterns
        are used as given, so callers control their flags.

        Raises:
            InvalidRuleError: If the pattern does not compile, or the
                replacement refers to a group the pattern does not define.
        """
        if not isinstance(replacement, str):
            raise InvalidRuleError(f"Replacement must be a string, got {replacement!r}")

        if isinstance(pattern, re.Pattern):
            compiled = pattern
        elif isinstance(pattern, str):
            try:
                compiled = re.compile(pattern, re.IGNORECASE)
            except re.error as exc:
                raise InvalidRuleError(f"Invalid rule pattern {pattern!r}: {exc}") from exc
        else:
            raise InvalidRuleError(f"Rule pattern must be a string or compiled regex, got {pattern!r}")

        _check_replacement(compiled, replacement)
        return cls(compiled, replacement)

    def apply(self, word: str) -> Optional[str]:
        """Return the word with the first match replaced, or None if the rule does not match."""
        result, count = self.pattern.subn(self.replacement, word, count=1)
        return result if count else None


def _match_case(source: str, target: str) -> str:
    # Only the first letter carries the caller's casing
    if not target:
        return target
    if source[:1].isupper():
        return target[0].upper() + target[1:]
    if source[:1].islower():
        return target[0].lower() + target[1:]
    return target


def _suffix_table(mapping: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    return tuple(sorted(mapping.items(), key=lambda item: (-len(item[0]), item[0])))


def _uncountable_pattern(words: frozenset[str]) -> Optional[re.Pattern[str]]:
    if not words:
        return None
    alternatives = "|".join(re.escape(w) for w in sorted(words, key=lambda w: (-len(w), w)))
    # Not preceded by a letter or digit
    return re.compile(rf"(?<![^\W_])(?:{alternatives})\Z", re.IGNORECASE)


@dataclass(frozen=True)
class RuleTable:
    """Immutable plural/singular rule set with irregular and uncountable overrides."""

    plurals: tuple[Rule, ...] = ()
    singulars: tuple[Rule, ...] = ()
    humans: tuple[Rule, ...] = ()
    irregulars: tuple[tuple[str, str], ...] = ()
    uncountables: frozenset[str] = frozenset()

    _to_plural: tuple[tuple[str, str], ...] = field(init=False, repr=False, compare=False)
    _to_singular: tuple[tuple[str, str], ...] = field(init=False, repr=False, compare=False)
    _uncountable_re: Optional[re.Pattern[str]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Both forms of an irregular pair map onto the target form, so an
        # already-plural word is left alone by pluralize (and vice versa).
        to_plural = {plural.lower(): plural for _, plural in self.irregulars}
        to_plural.update({singular.lower(): plural for singular, plural in self.irregulars})
        to_singular = {singular.lower(): singular for singular, _ in self.irregulars}
        to_singular.update({plural.lower(): singular for singular, plural in self.irregulars})

        object.__setattr__(self, "_to_plural", _suffix_table(to_plural))
        object.__setattr__(self, "_to_singular", _suffix_table(to_singular))
        object.__setattr__(self, "_uncountable_re", _uncountable_pattern(self.uncountables))

    @property
    def irregular_plurals(self) -> Mapping[str, str]:
        """Read-only view of singular -> plural for the registered irregulars."""
        return MappingProxyType({singular.lower(): plural for singular, plural in self.irregulars})

    @property
    def irregular_singulars(self) -> Mapping[str, str]:
        """Read-only view of plural -> singular for the registered irregulars."""
        return MappingProxyType({plural.lower(): singular for singular, plural in self.irregulars})

    def is_uncountable(self, word: str) -> bool:
        """
        Check whether a word (or its trailing word) is uncountable.

        Examples:
            >>> table.is_uncountable("Sheep")
            True
            >>> table.is_uncountable("my_money")
            True
            >>> table.is_uncountable("sheepdog")
            False
        """
        return bool(self._uncountable_re and self._uncountable_re.search(word))

    def pluralize(self, word: str, count: Optional[int] = None) -> str:
        """Return the plural form of word, or word itself when count == 1."""
        if count == 1:
            return word
        return self._inflect(word, self._to_plural, self.plurals)

    def singularize(self, word: str) -> str:
        """Return the singular form of word."""
        return self._inflect(word, self._to_singular, self.singulars)

    def humanize_rules(self, word: str) -> str:
        """Apply the first matching human rule, if any."""
        for rule in self.humans:
            result = rule.apply(word)
            if result is not None:
                return result
        return word

    def _inflect(self, word: str, irregulars: tuple[tuple[str, str], ...], rules: tuple[Rule, ...]) -> str:
        if not word or self.is_uncountable(word):
            return word

        replaced = self._replace_irregular(word, irregulars)
        if replaced is not None:
            return replaced

        for rule in rules:
            result = rule.apply(word)
            if result is not None:
                return result

        return word

    @staticmethod
    def _replace_irregular(word: str, irregulars: tuple[tuple[str, str], ...]) -> Optional[str]:
        for key, target in irregulars:
            if len(key) > len(word):
                continue
            start = len(word) - len(key)
            tail = word[start:]
            if tail.lower() == key:
                return word[:start] + _match_case(tail, target)
        return None
