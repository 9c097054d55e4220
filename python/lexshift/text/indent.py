"""
Line indentation.
"""

import re
from typing import Optional

_INDENT_SAMPLE = re.compile(r"^[ \t]", re.MULTILINE)
_LINE_START = re.compile(r"^(?!$)", re.MULTILINE)
_ANY_LINE_START = re.compile(r"^(?!\Z)", re.MULTILINE)


def indent_or_none(
    text: str,
    amount: int,
    indent_string: Optional[str] = None,
    indent_empty_lines: bool = False,
) -> Optional[str]:
    """
    Indent every line of text, or return None if no line would change.

    Args:
        text: Text to indent
        amount: How many copies of indent_string to prepend
        indent_string: Indentation unit; inferred from the first indented
            line (tab or space) when None, falling back to a space
        indent_empty_lines: Also indent lines with no content

    Returns:
        The indented text, or None when there was no line to indent
        (empty text, or only blank lines without indent_empty_lines)
    """
    if indent_string is None:
        sample = _INDENT_SAMPLE.search(text)
        indent_string = sample.group(0) if sample else " "

    pattern = _ANY_LINE_START if indent_empty_lines else _LINE_START
    result, count = pattern.subn(indent_string * max(amount, 0), text)
    return result if count else None


def indent(
    text: str,
    amount: int,
    indent_string: Optional[str] = None,
    indent_empty_lines: bool = False,
) -> str:
    """
    Indent every line of text by amount copies of indent_string.

    Examples:
        >>> indent("foo\\n  bar", 4)
        '    foo\\n      bar'
        >>> indent("foo\\n\\tbar", 1)
        '\\tfoo\\n\\t\\tbar'
        >>> indent("foo\\n\\nbar", 2)
        '  foo\\n\\n  bar'
        >>> indent("foo\\n\\nbar", 2, indent_empty_lines=True)
        '  foo\\n  \\n  bar'
    """
    result = indent_or_none(text, amount, indent_string, indent_empty_lines)
    return text if result is None else result
