"""
Exceptions raised by lexshift.

Transforms never raise for odd input; these are reserved for mistakes made
while configuring the inflection tables.
"""


class InflectionError(Exception):
    """Base class for all lexshift errors."""

    pass


class InvalidRuleError(InflectionError, ValueError):
    """Raised when a rule, irregular pair, uncountable or acronym cannot be registered."""

    pass


class ConfigurationError(InflectionError):
    """Raised when an inflection config file is missing, unreadable or malformed."""

    pass
