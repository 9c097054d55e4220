"""
Predicate-style string comparison.
"""

_PREFIX = "is_"


class StringInquirer(str):
    """
    A str that answers ``is_<value>`` attribute checks.

    Examples:
        >>> env = StringInquirer("production")
        >>> env.is_production
        True
        >>> env.is_development
        False
    """

    def __getattr__(self, name: str) -> bool:
        if name.startswith(_PREFIX) and len(name) > len(_PREFIX):
            return self == name[len(_PREFIX):]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


def inquiry(text: str) -> StringInquirer:
    """Wrap text in a StringInquirer."""
    return StringInquirer(text)
