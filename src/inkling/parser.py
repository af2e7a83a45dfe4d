"""Recursive tree builder for Inkling.

Consumes scanner tokens and produces a list of inline nodes. Delimiters that
never close, and inner delimiters crossed by an outer close, degrade to
literal ``Text`` rather than being dropped.

Recursion depth is bounded: a symbol cannot open while it is already open,
so at most three spans are open at any time.

Thread Safety:
Parser instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from inkling.errors import InvariantError
from inkling.lexer import DelimiterStack, Scanner
from inkling.nodes import DELIMITER_NODES, Container, Inline, Text
from inkling.tokens import LeftDelimiterToken, RightDelimiterToken, TextToken
from inkling.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Build a node tree from inline markup.

    Usage:
            >>> Parser("a *b* c").parse()
        [Text(content='a '), Strong(children=(Text(content='b'),)), Text(content=' c')]

    Thread Safety:
        Parser instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_open", "_scanner")

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
        """
        self._source = source
        self._open = DelimiterStack()
        self._scanner = Scanner(source, self._open)

    def parse(self) -> list[Inline]:
        """Parse the whole source.

        Returns:
            Top-level nodes in source order.
        """
        return self._collect()

    def _collect(self) -> list[Inline]:
        """Collect nodes until the span opened by the caller closes, or input ends."""
        nodes: list[Inline] = []
        scanner = self._scanner
        open_delimiters = self._open

        while (token := scanner.next_token()) is not None:
            match token:
                case TextToken(content=content):
                    nodes.append(Text(content))
                case LeftDelimiterToken(char=char):
                    open_delimiters.push(char)
                    nodes.extend(self._collect())
                case RightDelimiterToken(char=char, offset=offset) if char in open_delimiters:
                    return [self._close(char, nodes, offset)]
                case RightDelimiterToken(char=char, offset=offset):
                    logger.debug("Dangling close %r at offset %d kept as text", char, offset)
                    nodes.append(Text(char))

        if open_delimiters:
            unclosed = open_delimiters.drain()
            logger.debug("Unclosed delimiters %r kept as text", "".join(unclosed))
            nodes[:0] = [Text(symbol) for symbol in unclosed]
        return nodes

    def _close(self, char: str, nodes: list[Inline], offset: int) -> Container:
        """Wrap ``nodes`` in the container for ``char``.

        Symbols opened after ``char`` and still open are crossed by this close;
        they become literal text at the front of the children.
        """
        strays = self._open.pop_until(char)
        if strays:
            logger.debug(
                "Crossing delimiters %r closed by %r at offset %d kept as text",
                "".join(strays),
                char,
                offset,
            )
            nodes[:0] = [Text(symbol) for symbol in strays]

        node_type = DELIMITER_NODES.get(char)
        if node_type is None:
            raise InvariantError(f"no node type for delimiter {char!r}", offset=offset)
        return node_type(tuple(nodes))


def parse(source: str) -> list[Inline]:
    """Parse inline markup into a list of nodes.

    Example:
        >>> parse("_*x*_")
        [Emphasis(children=(Strong(children=(Text(content='x'),)),))]
    """
    return Parser(source).parse()


__all__ = ["Parser", "parse"]
