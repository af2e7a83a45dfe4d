"""Exception classes for Inkling.

Malformed markup is never an error: unmatched and crossing delimiters degrade
to literal text. The exceptions here cover programming mistakes (bad
configuration, non-node values handed to a renderer) and broken internal
invariants.
"""

from __future__ import annotations


class InklingError(Exception):
    """Base exception for all Inkling errors."""

    pass


class InvariantError(InklingError):
    """An internal invariant of the parser was violated.

    Raised when a symbol that is not one of ``*``, ``_``, ``~`` reaches
    close-node construction. The delimiter stack is only ever fed symbols the
    scanner classified as delimiters, so no input can trigger this; seeing it
    means the parser state is corrupted. Inkling never catches it.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize invariant error.

        Args:
            message: Description of the violated invariant
            offset: Source offset of the token being processed (optional)
        """
        self.message = message
        self.offset = offset
        location = f"offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class RenderError(InklingError):
    """Error during rendering.

    Raised when a renderer receives a value that is not an Inkling node.
    """

    pass


class ConfigError(InklingError):
    """Invalid render configuration.

    Raised by ``RenderConfig.from_dict`` for unknown node names or unusable
    tag names.
    """

    def __init__(self, key: str, message: str) -> None:
        """Initialize config error.

        Args:
            key: The offending configuration key
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Config '{key}': {message}")
