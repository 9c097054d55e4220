"""
String filters: whitespace squeezing, removal and truncation.
"""

import re
from typing import Optional, Union

# \s on str patterns covers Unicode whitespace: NBSP, NEL (U+0085),
# figure space, ideographic space and the rest of the Zs category.
_WHITESPACE = re.compile(r"\s+")

DEFAULT_OMISSION = "..."


def squish(text: str) -> str:
    """
    Collapse every run of whitespace to one space and strip both ends.

    Examples:
        >>> squish("  foo   bar \\n \\t  boo")
        'foo bar boo'
        >>> squish("\\u3000 wide\\u00a0spaces \\u0085")
        'wide spaces'
    """
    return _WHITESPACE.sub(" ", text).strip(" ")


def remove(text: str, *patterns: Union[str, re.Pattern]) -> str:
    """
    Remove every occurrence of each pattern.

    Examples:
        >>> remove("Fast Summer", re.compile(r"Fast "))
        'Summer'
        >>> remove("foo bar test", " test", "bar")
        'foo '
    """
    result = str(text)
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            result = pattern.sub("", result)
        else:
            result = result.replace(pattern, "")
    return result


def exclude(text: str, substring: str) -> bool:
    """Inverse of ``substring in text``."""
    return substring not in text


def _separator_index(text: str, separator: Union[str, re.Pattern], limit: int) -> Optional[int]:
    # Last position <= limit where the separator starts
    if isinstance(separator, re.Pattern):
        for position in range(min(limit, len(text)), -1, -1):
            if separator.match(text, position):
                return position
        return None
    index = text.rfind(separator, 0, limit + len(separator))
    return index if index != -1 else None


def truncate(
    text: str,
    length: int,
    omission: str = DEFAULT_OMISSION,
    separator: Optional[Union[str, re.Pattern]] = None,
) -> str:
    """
    Shorten text to at most length characters.

    If text is longer than length, it is cut so that the cut text plus
    omission fits in length characters. With a separator, the cut moves back
    to the last separator at or before the cut point, giving a more natural
    break.

    Args:
        text: Text to truncate
        length: Maximum length of the result, omission included
        omission: Marker appended when text is cut (default: "...")
        separator: String or compiled pattern to break on

    Returns:
        A plain str of at most length characters (never a str subclass)

    Examples:
        >>> truncate("Once upon a time in a world far far away", 27)
        'Once upon a time in a wo...'
        >>> truncate("Once upon a time in a world far far away", 27, separator=" ")
        'Once upon a time in a...'
        >>> truncate("And they found that many people were sleeping better.", 25, omission="... (continued)")
        'And they f... (continued)'

    Edge Cases:
        - length <= 0: empty string
        - omission longer than length: the omission itself, cut to length
        - no separator before the cut point: plain cut
    """
    text = str(text)
    if len(text) <= length:
        return text
    if length <= 0:
        return ""
    if len(omission) >= length:
        return omission[:length]

    stop = length - len(omission)
    if separator:
        index = _separator_index(text, separator, stop)
        if index is not None:
            stop = index

    return f"{text[:stop]}{omission}"
