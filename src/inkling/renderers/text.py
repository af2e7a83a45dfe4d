"""Plain-text renderer — markup removed.

Useful for search indexing and length checks where only the visible text
matters. Degraded delimiters (kept as ``Text`` by the parser) are part of the
visible text and are preserved.

Example:
    >>> from inkling.parser import parse
    >>> TextRenderer().render(parse("The *quick* ~red~ fox"))
    'The quick red fox'
"""

from collections.abc import Iterable

from inkling.errors import RenderError
from inkling.nodes import Emphasis, Inline, Node, Strikethrough, Strong, Text
from inkling.visitor import BaseVisitor


class _TextCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.parts: list[str] = []

    def visit_default(self, node: Node) -> None:
        raise RenderError(f"cannot render {type(node).__name__}: not an inkling node")

    def visit_text(self, node: Text) -> None:
        self.parts.append(node.content)

    # Containers contribute nothing themselves; their children are walked.
    def visit_strong(self, node: Strong) -> None:
        pass

    def visit_emphasis(self, node: Emphasis) -> None:
        pass

    def visit_strikethrough(self, node: Strikethrough) -> None:
        pass


class TextRenderer:
    """Render nodes to plain text with every span unwrapped."""

    __slots__ = ()

    def render(self, nodes: Iterable[Inline]) -> str:
        """Render top-level nodes to plain text."""
        collector = _TextCollector()
        for node in nodes:
            collector.visit(node)
        return "".join(collector.parts)

    def render_node(self, node: Inline) -> str:
        """Render a single node to plain text."""
        return self.render((node,))
