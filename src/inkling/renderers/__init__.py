"""Inkling renderers.

Renderers convert node trees into output text.

Available Renderers:
- HtmlRenderer: Renders nodes to tagged markup
- TextRenderer: Renders nodes to plain text with all markup removed

Thread Safety:
Renderers keep no per-call state on the instance.
Safe for concurrent use from multiple threads.

"""

from inkling.renderers.html import HtmlRenderer
from inkling.renderers.protocol import NodeRenderer
from inkling.renderers.text import TextRenderer

__all__ = ["HtmlRenderer", "NodeRenderer", "TextRenderer"]
