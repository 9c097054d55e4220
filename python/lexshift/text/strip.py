"""
Heredoc margin stripping.
"""

import re

_MARGIN = re.compile(r"^[ \t]*(?=\S)", re.MULTILINE)


def strip_heredoc(text: str) -> str:
    """
    Remove the indentation shared by every non-blank line.

    The narrowest leading run of spaces and tabs among lines that have
    content decides how many columns come off each line. Relative
    indentation is kept, and blank lines lose at most that many columns.

    Examples:
        >>> strip_heredoc("    def f():\\n      return 1\\n")
        'def f():\\n  return 1\\n'
        >>> strip_heredoc("\\n\\n")
        '\\n\\n'
    """
    margins = _MARGIN.findall(text)
    if not margins:
        return text

    width = min(len(margin) for margin in margins)
    if width == 0:
        return text

    return re.sub(rf"^[ \t]{{1,{width}}}", "", text, flags=re.MULTILINE)
