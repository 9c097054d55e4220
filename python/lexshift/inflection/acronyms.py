"""
Acronym registry for case conversion.

An acronym keeps a fixed display form ("HTML", "RESTful", "PhD") when
camelize() builds words from underscored input and when underscore() splits
camel-cased input back apart. Both directions use patterns derived from the
same registry, so they stay inverse to each other.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

# Never matches; used when no acronyms are registered
_NO_ACRONYMS = r"(?=a)b"


@dataclass(frozen=True)
class AcronymRegistry:
    """Immutable mapping from lowercase acronym key to its display form."""

    acronyms: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    lower_first_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    underscore_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        frozen = MappingProxyType(dict(self.acronyms))
        object.__setattr__(self, "acronyms", frozen)

        if frozen:
            # Longest first so "RESTful" wins over "REST"
            values = sorted(frozen.values(), key=lambda v: (-len(v), v))
            pattern = "(?:" + "|".join(re.escape(v) for v in values) + ")"
        else:
            pattern = _NO_ACRONYMS

        object.__setattr__(
            self, "lower_first_re", re.compile(rf"^(?:{pattern}(?=\b|[A-Z_])|\w)")
        )
        object.__setattr__(
            self, "underscore_re", re.compile(rf"(?:(?<=([A-Za-z\d]))|\b)({pattern})(?=\b|[^a-z])")
        )

    def lookup(self, key: str) -> Optional[str]:
        """
        Return the display form registered for an exact lowercase key.

        Examples:
            >>> registry.lookup("html")
            'HTML'
            >>> registry.lookup("HTML") is None
            True
        """
        return self.acronyms.get(key)

    def lookup_word(self, word: str) -> Optional[str]:
        """Return the display form for word in any casing."""
        return self.acronyms.get(word.lower())
