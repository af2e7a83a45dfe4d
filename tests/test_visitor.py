"""Tests for BaseVisitor and transform."""

from inkling import parse
from inkling.nodes import Emphasis, Node, Strikethrough, Strong, Text
from inkling.visitor import BaseVisitor, transform


class _Counter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_default(self, node: Node) -> None:
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1


class _StrongCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.found: list[Strong] = []

    def visit_strong(self, node: Strong) -> None:
        self.found.append(node)


class TestBaseVisitor:
    def test_walks_every_node(self) -> None:
        counter = _Counter()
        for node in parse("a _*b* ~c~_"):
            counter.visit(node)
        assert counter.counts == {"Text": 4, "Emphasis": 1, "Strong": 1, "Strikethrough": 1}

    def test_specific_method_called(self) -> None:
        collector = _StrongCollector()
        for node in parse("*a* and *b*"):
            collector.visit(node)
        assert collector.found == [Strong((Text("a"),)), Strong((Text("b"),))]

    def test_visit_returns_method_result(self) -> None:
        class Namer(BaseVisitor[str]):
            def visit_default(self, node: Node) -> str:
                return type(node).__name__

        assert Namer().visit(Emphasis((Text("x"),))) == "Emphasis"


class TestTransform:
    def test_identity_returns_same_object(self) -> None:
        node = Strong((Text("a"), Emphasis((Text("b"),))))
        assert transform(node, lambda n: n) is node

    def test_rewrites_text(self) -> None:
        def shout(node: Node) -> Node:
            if isinstance(node, Text):
                return Text(node.content.upper())
            return node

        node = Emphasis((Text("a"), Strong((Text("b"),))))
        assert transform(node, shout) == Emphasis((Text("A"), Strong((Text("B"),))))

    def test_removes_nodes(self) -> None:
        def drop_struck(node: Node) -> Node | None:
            return None if isinstance(node, Strikethrough) else node

        node = Strong((Text("a"), Strikethrough((Text("b"),)), Text("c")))
        assert transform(node, drop_struck) == Strong((Text("a"), Text("c")))
        assert transform(Strikethrough(()), drop_struck) is None

    def test_input_tree_untouched(self) -> None:
        node = Strong((Text("a"),))
        transform(node, lambda n: Text("x") if isinstance(n, Text) else n)
        assert node == Strong((Text("a"),))
