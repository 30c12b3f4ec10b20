#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Diagram rendering collaborators.

A diagram block holds diagram source code (Mermaid syntax) and an optional
theme. Turning that source into a picture is delegated to a
:class:`DiagramRenderer`. The default :class:`ClientSideDiagramRenderer`
does no layout itself: it emits the escaped source in a
``<pre class="mermaid">`` element for the Mermaid script on the page to pick
up. Server-side renderers (for example one calling ``mmdc``) plug in through
``HtmlRendererOptions.diagram_renderer``.

Renderers may raise any exception; the HTML renderer isolates the failure to
the one diagram block.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, runtime_checkable

from blockrender.utils.html_utils import escape_html, html_attrs

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagramRenderer(Protocol):
    """Contract for diagram collaborators."""

    def render(self, source: str, theme: str) -> str:
        """Return HTML markup (typically SVG) for the diagram ``source``."""
        ...


class ClientSideDiagramRenderer:
    """Emit diagram source for rendering in the browser."""

    def render(self, source: str, theme: str) -> str:
        """Wrap the escaped source in ``<pre class="mermaid">``.

        Parameters
        ----------
        source : str
            Diagram source code
        theme : str
            Mermaid theme name, passed through as ``data-theme``

        Returns
        -------
        str
            Markup picked up by the Mermaid client script

        """
        attrs = html_attrs({"class": "mermaid", "data-theme": theme})
        return f"<pre{attrs}>{escape_html(source)}</pre>"


class DiagramCache:
    """Per-pass memo of rendered diagrams keyed by block id, theme and source.

    Only successful renders are stored; a failing diagram is retried if it
    is rendered again.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str, str], str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_render(self, block_id: str, theme: str, source: str, render: Callable[[], str]) -> str:
        """Return the cached markup for ``(block_id, theme, source)``, rendering it once if absent."""
        key = (block_id, theme, source)
        cached: Optional[str] = self._entries.get(key)
        if cached is not None:
            logger.debug("Reusing rendered diagram for block %s", block_id)
            return cached
        markup = render()
        self._entries[key] = markup
        return markup

    def clear(self) -> None:
        """Drop every cached entry."""
        self._entries.clear()
