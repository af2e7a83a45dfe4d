"""Typed tokens passed from the scanner to the parser.

Uses NamedTuples for token representation, providing:
- Immutability by default
- Tuple unpacking and ``match`` class patterns
- Low memory footprint (tokens are created for every run and delimiter)

Thread Safety:
All tokens are immutable and safe to share across threads.

Usage:
    from inkling.tokens import LeftDelimiterToken, TextToken

    match token:
        case LeftDelimiterToken(char="*"):
            print("bold opens")
        case TextToken(content=content):
            print(content)

"""

from __future__ import annotations

from typing import Literal, NamedTuple

# PEP 695 type alias for delimiter characters
type DelimiterChar = Literal["*", "_", "~"]


class TextToken(NamedTuple):
    """Literal run of characters with no semantic role.

    Attributes:
        content: The text content.
        offset: Index of the first character in the source.

    """

    content: str
    offset: int = 0


class LeftDelimiterToken(NamedTuple):
    """Delimiter recognized as opening a span.

    Attributes:
        char: The delimiter character ("*", "_", or "~").
        offset: Index of the delimiter in the source.

    """

    char: DelimiterChar
    offset: int = 0


class RightDelimiterToken(NamedTuple):
    """Delimiter recognized as closing a span.

    Attributes:
        char: The delimiter character ("*", "_", or "~").
        offset: Index of the delimiter in the source.

    """

    char: DelimiterChar
    offset: int = 0


# PEP 695 type alias for all scanner tokens
type InlineToken = TextToken | LeftDelimiterToken | RightDelimiterToken


__all__ = [
    "DelimiterChar",
    "InlineToken",
    "LeftDelimiterToken",
    "RightDelimiterToken",
    "TextToken",
]
