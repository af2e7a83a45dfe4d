"""Single-pass scanner with O(n) guaranteed performance.

Classifies every delimiter from local context only: the character before it,
the character after it, and whether the same symbol is currently open. The
cursor always advances, so scanning terminates for any input.

The set of open symbols lives in a ``DelimiterStack`` shared with whoever
consumes the tokens. The scanner only reads it; the consumer pushes on every
``LeftDelimiterToken`` and pops through the symbol on every
``RightDelimiterToken`` before asking for the next token. ``Parser`` and
``tokenize`` both follow that protocol, so classification and tree shape are
driven by the same state.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from inkling.charsets import DELIMITERS, is_boundary, is_whitespace
from inkling.tokens import (
    InlineToken,
    LeftDelimiterToken,
    RightDelimiterToken,
    TextToken,
)


class DelimiterStack:
    """Delimiter symbols that are currently open, innermost last.

    A symbol is never pushed while it is already open, so the stack holds at
    most one entry per delimiter symbol.

    Usage:
        >>> stack = DelimiterStack()
        >>> stack.push("*")
        >>> stack.push("_")
        >>> stack.pop_until("*")
        ('_',)
        >>> len(stack)
        0

    """

    __slots__ = ("_symbols",)

    def __init__(self) -> None:
        self._symbols: list[str] = []

    def __contains__(self, char: object) -> bool:
        return char in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"DelimiterStack({''.join(self._symbols)!r})"

    def push(self, char: str) -> None:
        """Record ``char`` as open."""
        self._symbols.append(char)

    def pop_until(self, char: str) -> tuple[str, ...]:
        """Pop entries until one equal to ``char`` is removed.

        Args:
            char: The symbol being closed

        Returns:
            Symbols popped before the match (opened after ``char`` and never
            closed), in the order they were pushed.
        """
        strays: list[str] = []
        while self._symbols:
            popped = self._symbols.pop()
            if popped == char:
                break
            strays.append(popped)
        strays.reverse()
        return tuple(strays)

    def drain(self) -> tuple[str, ...]:
        """Remove and return every open symbol, in the order they were pushed."""
        symbols = tuple(self._symbols)
        self._symbols.clear()
        return symbols


class Scanner:
    """Lazy scanner producing one token per ``next_token()`` call.

    Usage:
            >>> stack = DelimiterStack()
            >>> scanner = Scanner("a *b*", stack)
            >>> scanner.next_token()
        TextToken(content='a ', offset=0)
            >>> scanner.next_token()
        LeftDelimiterToken(char='*', offset=2)

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_len", "_pos", "_open")

    def __init__(self, source: str, open_delimiters: DelimiterStack) -> None:
        """Initialize scanner with source text.

        Args:
            source: Markup source text
            open_delimiters: Shared stack of open symbols, maintained by the
                token consumer
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._open = open_delimiters

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._pos

    def next_token(self) -> InlineToken | None:
        """Scan the next token.

        Returns:
            The next token, or None at end of input.
        """
        if self._pos >= self._source_len:
            return None

        char = self._source[self._pos]
        if char not in DELIMITERS:
            return self._scan_text()

        token = self._scan_left(char) or self._scan_right(char)
        if token is None:
            token = TextToken(char, self._pos)
            self._pos += 1
        return token

    # =========================================================================
    # Neighbour helpers
    # =========================================================================

    def _previous(self) -> str:
        """Character before the cursor, or empty string at start of input."""
        if self._pos == 0:
            return ""
        return self._source[self._pos - 1]

    def _next(self) -> str:
        """Character after the cursor, or empty string at end of input."""
        index = self._pos + 1
        if index >= self._source_len:
            return ""
        return self._source[index]

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_text(self) -> TextToken:
        """Consume a maximal run of non-delimiter characters."""
        start = self._pos
        source = self._source
        pos = start
        while pos < self._source_len and source[pos] not in DELIMITERS:
            pos += 1
        self._pos = pos
        return TextToken(source[start:pos], start)

    def _scan_left(self, char: str) -> LeftDelimiterToken | None:
        """Try to classify ``char`` as an opening delimiter.

        Start of input counts as a boundary; end of input never opens.
        """
        before = self._previous()
        after = self._next()
        if not after:
            return None
        if before and not is_boundary(before):
            return None
        if is_whitespace(after) or char in self._open:
            return None

        token = LeftDelimiterToken(char, self._pos)  # type: ignore[arg-type]
        self._pos += 1
        return token

    def _scan_right(self, char: str) -> RightDelimiterToken | None:
        """Try to classify ``char`` as a closing delimiter.

        End of input counts as a boundary; start of input never closes.
        """
        before = self._previous()
        if not before or is_whitespace(before):
            return None
        after = self._next()
        if after and not is_boundary(after):
            return None
        if char not in self._open:
            return None

        token = RightDelimiterToken(char, self._pos)  # type: ignore[arg-type]
        self._pos += 1
        return token


def tokenize(source: str) -> Iterator[InlineToken]:
    """Tokenize source into a token stream.

    Drives a private scanner and keeps its delimiter stack up to date, so the
    stream is exactly what the parser sees.

    Yields:
        Tokens one at a time

    Complexity: O(n) where n = len(source)
    """
    stack = DelimiterStack()
    scanner = Scanner(source, stack)
    while (token := scanner.next_token()) is not None:
        match token:
            case LeftDelimiterToken(char=char):
                stack.push(char)
            case RightDelimiterToken(char=char):
                stack.pop_until(char)
        yield token


__all__ = ["DelimiterStack", "Scanner", "tokenize"]
