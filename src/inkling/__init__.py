"""
Inkling — inline markup to tagged text

Turns ``*bold*``, ``_italic_`` and ``~strike~`` markup into a typed node tree
and renders it. Unmatched or crossing delimiters never raise; they degrade to
literal text. O(n) parsing, immutable trees, zero runtime dependencies.

Quick Start:
    >>> from inkling import parse, render
    >>> render("The *quick*, ~red~ brown fox")
    'The <strong>quick</strong>, <del>red</del> brown fox'

    >>> parse("_*x*_")
    [Emphasis(children=(Strong(children=(Text(content='x'),)),))]

    >>> # Or use the high-level Markup class with custom tags
    >>> from inkling import Markup
    >>> md = Markup(tags={"Emphasis": "em"})
    >>> md("_hi_")
    '<em>hi</em>'
"""

from collections.abc import Callable, Iterable, Mapping

from inkling.config import (
    DEFAULT_TAGS,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from inkling.errors import ConfigError, InklingError, InvariantError, RenderError
from inkling.lexer import DelimiterStack, Scanner, tokenize
from inkling.nodes import Emphasis, Inline, Node, Strikethrough, Strong, Text
from inkling.parser import Parser, parse
from inkling.renderers.html import HtmlRenderer
from inkling.renderers.protocol import NodeRenderer
from inkling.renderers.text import TextRenderer
from inkling.serialization import from_dict, from_json, to_dict, to_json
from inkling.tokens import InlineToken, LeftDelimiterToken, RightDelimiterToken, TextToken
from inkling.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def render(source: str) -> str:
    """Parse markup and render it to tagged text.

    Always succeeds for any string; malformed markup degrades to literal text.
    Uses the render config active in the current context.

    Example:
        >>> render("a *b* c")
        'a <strong>b</strong> c'
        >>> render("a * b")
        'a * b'
    """
    return HtmlRenderer().render(parse(source))


class Markup:
    """High-level processor combining parser and renderer.

    Usage:
        >>> md = Markup()
        >>> md("a _b_")
        'a <i>b</i>'

        >>> md = Markup(escape_html=True)
        >>> md("*<b>*")
        '<strong>&lt;b&gt;</strong>'

    Thread Safety:
        Holds only an immutable config. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        tags: Mapping[str, str] | None = None,
        escape_html: bool | None = None,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            config: Base render config (defaults to the context's config)
            tags: Override tag names per node class name
            escape_html: Override HTML escaping of text content
            text_transformer: Override the text node callback
        """
        base = config if config is not None else get_render_config()
        overrides: dict = {
            "tags": {**base.tags, **(tags or {})},
            "escape_html": base.escape_html if escape_html is None else escape_html,
            "text_transformer": text_transformer or base.text_transformer,
        }
        self._config = RenderConfig.from_dict(overrides)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str) -> list[Inline]:
        """Parse markup into top-level nodes."""
        return Parser(source).parse()

    def parse_many(self, sources: Iterable[str]) -> list[list[Inline]]:
        """Parse several sources, one independent parser each.

        Example:
            >>> Markup().parse_many(["*a*", "b"])
            [[Strong(children=(Text(content='a'),))], [Text(content='b')]]
        """
        return [Parser(source).parse() for source in sources]

    def render(self, nodes: Iterable[Inline]) -> str:
        """Render parsed nodes with this processor's config."""
        return HtmlRenderer(self._config).render(nodes)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Markup",
    # Nodes
    "Node",
    "Inline",
    "Text",
    "Strong",
    "Emphasis",
    "Strikethrough",
    # Parser components
    "DelimiterStack",
    "Scanner",
    "tokenize",
    "Parser",
    # Tokens
    "InlineToken",
    "TextToken",
    "LeftDelimiterToken",
    "RightDelimiterToken",
    # Renderers
    "HtmlRenderer",
    "TextRenderer",
    "NodeRenderer",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "DEFAULT_TAGS",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "InklingError",
    "InvariantError",
    "RenderError",
    "ConfigError",
]
