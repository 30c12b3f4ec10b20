#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/blockrender/renderers/__init__.py
"""Renderers for block documents.

- BaseRenderer: abstract base shared by renderers
- HtmlRenderer: render to HTML fragments or standalone pages

Examples
--------
    >>> from blockrender.ast import Paragraph, StyledText
    >>> from blockrender.options import HtmlRendererOptions
    >>> from blockrender.renderers import HtmlRenderer
    >>> renderer = HtmlRenderer(HtmlRendererOptions(syntax_highlighting=False))
    >>> renderer.render_to_string([Paragraph(id="p", content=[StyledText(text="Hi")])])
    '<section><p class="mb-4 leading-relaxed">Hi</p></section>\\n'

"""

from blockrender.renderers.base import BaseRenderer, InlineContentMixin
from blockrender.renderers.html import HtmlRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
]
