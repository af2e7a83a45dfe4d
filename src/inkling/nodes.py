"""Typed tree nodes for Inkling.

All nodes are frozen dataclasses with slots for:
- Immutability: the parsed tree is a pure value, safe to share across threads
- Structural equality: two parses of the same input compare equal
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
Node (base)
├── Text
├── Strong          (*...*)
├── Emphasis        (_..._)
└── Strikethrough   (~...~)

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text.

    Also produced for delimiters that could not be matched.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markup: *text*
    HTML: <strong>text</strong>

    """

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized (italic) text.

    Markup: _text_
    HTML: <i>text</i>

    """

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Strikethrough (deleted) text.

    Markup: ~text~
    HTML: <del>text</del>

    """

    children: tuple[Inline, ...] = ()


type Inline = Text | Strong | Emphasis | Strikethrough
type Container = Strong | Emphasis | Strikethrough

# Container node produced by each delimiter symbol
DELIMITER_NODES: dict[str, type[Strong] | type[Emphasis] | type[Strikethrough]] = {
    "*": Strong,
    "_": Emphasis,
    "~": Strikethrough,
}


__all__ = [
    "DELIMITER_NODES",
    "Container",
    "Emphasis",
    "Inline",
    "Node",
    "Strikethrough",
    "Strong",
    "Text",
]
