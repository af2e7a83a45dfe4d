"""Text helpers shared by the renderers."""

from __future__ import annotations

import html


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for safe inclusion in tagged output.

    Single quotes are left alone; tag content never lives inside a
    single-quoted attribute.

    Examples:
        >>> escape_html('<b> & "q"')
        '&lt;b&gt; &amp; &quot;q&quot;'
        >>> escape_html("it's")
        "it's"
    """
    return html.escape(text, quote=False).replace('"', "&quot;")
