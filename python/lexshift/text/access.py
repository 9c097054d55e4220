"""
Positional access to strings by character offset.

Offsets count code points, never bytes. Negative offsets count from the
end. Nothing here raises for an offset outside the string: single
characters come back as None, substrings are clamped.
"""

import re
from typing import Optional, Union

Position = Union[int, slice, str, re.Pattern]


def at(text: str, position: Position) -> Optional[str]:
    """
    Return part of a string addressed by offset, range or pattern.

    Args:
        text: String to read from
        position: One of
            - int: the single character at that offset
            - slice: the substring covering those offsets
            - compiled pattern: the first match
            - str: the substring itself, if it occurs

    Returns:
        The addressed substring, or None when an offset is out of range or
        nothing matches

    Examples:
        >>> at("hello", 0)
        'h'
        >>> at("hello", slice(-2, None))
        'lo'
        >>> at("hello", re.compile("lo"))
        'lo'
        >>> at("hello", re.compile("nonexisting")) is None
        True
    """
    if isinstance(position, int):
        if -len(text) <= position < len(text):
            return text[position]
        return None
    if isinstance(position, slice):
        return text[position]
    if isinstance(position, re.Pattern):
        match = position.search(text)
        return match.group(0) if match else None
    if isinstance(position, str):
        return position if position in text else None
    raise TypeError(f"Unsupported position {position!r}")


def from_(text: str, position: int) -> str:
    """
    Return the substring from position to the end.

    Examples:
        >>> from_("hello", 2)
        'llo'
        >>> from_("hello", -2)
        'lo'
    """
    return text[position:]


def to(text: str, position: int) -> str:
    """
    Return the substring from the start up to and including position.

    Examples:
        >>> to("hello", 2)
        'hel'
        >>> to("hello", -2)
        'hell'
        >>> to("hello", -1)
        'hello'
    """
    end = position + 1
    return text[:end] if end != 0 else text


def first(text: str, limit: int = 1) -> str:
    """
    Return the first limit characters.

    Examples:
        >>> first("hello")
        'h'
        >>> first("hello", 10)
        'hello'
        >>> first("hello", 0)
        ''
    """
    if limit <= 0:
        return ""
    return text[:limit]


def last(text: str, limit: int = 1) -> str:
    """
    Return the last limit characters.

    Examples:
        >>> last("hello")
        'o'
        >>> last("hello", 3)
        'llo'
        >>> last("hello", 0)
        ''
    """
    if limit <= 0:
        return ""
    return text[-limit:]
