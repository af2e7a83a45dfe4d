"""Tagged-markup renderer.

Each container node becomes ``<tag>children</tag>``; text nodes are emitted
as-is unless escaping is enabled. Output fragments are accumulated in a list
and joined once, giving O(n) rendering.

Thread Safety:
HtmlRenderer holds only its immutable config. Multiple threads can share one
instance and call render() concurrently.
"""

from collections.abc import Iterable

from inkling.config import RenderConfig, get_render_config
from inkling.errors import RenderError
from inkling.nodes import Emphasis, Inline, Strikethrough, Strong, Text
from inkling.utils.text import escape_html


class HtmlRenderer:
    """Render nodes to tagged markup.

    Usage:
        >>> from inkling.parser import parse
        >>> HtmlRenderer().render(parse("a *b* c"))
        'a <strong>b</strong> c'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. Defaults to the config active in the
                current context when the renderer is created.
        """
        self._config = config if config is not None else get_render_config()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, nodes: Iterable[Inline]) -> str:
        """Render top-level nodes, concatenated in order."""
        parts: list[str] = []
        for node in nodes:
            self._render_node(node, parts)
        return "".join(parts)

    def render_node(self, node: Inline) -> str:
        """Render a single node and its descendants."""
        parts: list[str] = []
        self._render_node(node, parts)
        return "".join(parts)

    def _render_node(self, node: Inline, parts: list[str]) -> None:
        match node:
            case Text(content=content):
                parts.append(self._text(content))
            case Strong():
                self._render_container("Strong", node.children, parts)
            case Emphasis():
                self._render_container("Emphasis", node.children, parts)
            case Strikethrough():
                self._render_container("Strikethrough", node.children, parts)
            case _:
                raise RenderError(f"cannot render {type(node).__name__}: not an inkling node")

    def _render_container(
        self, node_name: str, children: tuple[Inline, ...], parts: list[str]
    ) -> None:
        # Keyed by the matched base class so subclasses reuse its tag
        tag = self._config.tag_for(node_name)
        parts.append(f"<{tag}>")
        for child in children:
            self._render_node(child, parts)
        parts.append(f"</{tag}>")

    def _text(self, content: str) -> str:
        config = self._config
        if config.text_transformer:
            content = config.text_transformer(content)
        if config.escape_html:
            content = escape_html(content)
        return content
