"""NodeRenderer protocol — stable interface for tree renderers.

Any renderer that implements ``render(nodes) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from inkling.renderers.protocol import NodeRenderer

    def render_snippet(renderer: NodeRenderer, nodes: list[Inline]) -> str:
        return renderer.render(nodes)

"""

from collections.abc import Iterable
from typing import Protocol

from inkling.nodes import Inline


class NodeRenderer(Protocol):
    """Protocol for node renderers.

    Implementations accept a sequence of top-level nodes and return the
    concatenated rendering.

    """

    def render(self, nodes: Iterable[Inline]) -> str:
        """Render top-level nodes to a string.

        Args:
            nodes: Parsed nodes, in source order.

        Returns:
            Rendered string output.

        """
        ...
