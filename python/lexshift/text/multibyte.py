"""
Encoding checks for raw byte strings.
"""


def is_utf8(data: bytes) -> bool:
    """
    Check whether data decodes as UTF-8.

    Examples:
        >>> is_utf8("résumé".encode("utf-8"))
        True
        >>> is_utf8("résumé".encode("latin-1"))
        False
    """
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True
