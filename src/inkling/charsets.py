"""Character classification for the scanner.

All sets are frozensets for O(1) membership tests and are built once at
import time.

Two predicates drive every delimiter decision:

- ``is_whitespace``: tab, LF, VT, FF, CR, NEL and Unicode categories
  Zs, Zl, Zp.
- ``is_boundary``: whitespace, Unicode punctuation (P* categories) and the
  literal ``~``. ``~`` is a math symbol (Sm), so it is added explicitly; other
  symbols such as ``$`` or ``+`` are not boundaries.

Usage:
    from inkling.charsets import DELIMITERS, is_boundary

    if char in DELIMITERS and is_boundary(previous):
        ...
"""

import unicodedata

# The only characters that can open or close a span
DELIMITERS: frozenset[str] = frozenset("*_~")

# Control characters treated as whitespace (newlines included)
WHITESPACE_CONTROLS: frozenset[str] = frozenset("\t\n\v\f\r\x85")

# Unicode categories for space, line and paragraph separators
_SEPARATOR_CATEGORIES: frozenset[str] = frozenset(("Zs", "Zl", "Zp"))

# Unicode punctuation categories
_PUNCTUATION_CATEGORIES: frozenset[str] = frozenset(("Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po"))

# Symbols counted as boundaries in addition to whitespace and punctuation
EXTRA_BOUNDARIES: frozenset[str] = frozenset("~")


def is_delimiter(char: str) -> bool:
    """Check if character is one of the three delimiter symbols."""
    return char in DELIMITERS


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace or a newline."""
    if char in WHITESPACE_CONTROLS:
        return True
    return unicodedata.category(char) in _SEPARATOR_CATEGORIES


def is_punctuation(char: str) -> bool:
    """Check if character belongs to a Unicode punctuation category."""
    return unicodedata.category(char) in _PUNCTUATION_CATEGORIES


def is_boundary(char: str) -> bool:
    """Check if character may sit next to a delimiter that opens or closes.

    The boundary set is whitespace, punctuation and ``~``.

    Examples:
        >>> is_boundary(" "), is_boundary(","), is_boundary("~")
        (True, True, True)
        >>> is_boundary("a"), is_boundary("$")
        (False, False)
    """
    return char in EXTRA_BOUNDARIES or is_whitespace(char) or is_punctuation(char)
