"""Tree visitor and transformer for Inkling.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example — count bold spans:

    class StrongCounter(BaseVisitor[None]):
        def __init__(self) -> None:
            self.count = 0

        def visit_strong(self, node: Strong) -> None:
            self.count += 1

    counter = StrongCounter()
    for node in parse("*a* and *b*"):
        counter.visit(node)

Example — drop strikethrough spans:

    def drop_struck(node: Node) -> Node | None:
        if isinstance(node, Strikethrough):
            return None
        return node

    kept = [r for n in nodes if (r := transform(n, drop_struck)) is not None]

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure — safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from inkling.nodes import Emphasis, Node, Strikethrough, Strong, Text


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        for child in getattr(node, "children", ()):
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Text():
                return self.visit_text(node)
            case Strong():
                return self.visit_strong(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case _:
                return self.visit_default(node)


def transform(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Rewrite a tree bottom-up without mutating it.

    Children are transformed first, then ``fn`` is applied to the rebuilt
    node. Returning ``None`` from ``fn`` removes the node from its parent.

    Args:
        node: Root of the tree to rewrite.
        fn: Called once per node; returns the replacement node or None.

    Returns:
        The rewritten root, or None if ``fn`` removed it.

    """
    children = getattr(node, "children", None)
    if children is not None:
        new_children = tuple(
            result for child in children if (result := transform(child, fn)) is not None
        )
        if new_children != children:
            node = dataclasses.replace(node, children=new_children)  # type: ignore[call-arg]
    return fn(node)


__all__ = ["BaseVisitor", "transform"]
