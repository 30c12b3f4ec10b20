#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Syntax highlighting for code blocks.

Highlighting is a collaborator of the HTML renderer: anything with a
``highlight(language, code, theme)`` method returning markup will do. The
default implementation uses Pygments, imported lazily on first use through a
process-wide :class:`~blockrender.utils.lazy.LazyModule` handle so documents
without code never pay for the import.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from blockrender.constants import DEFAULT_CODE_THEME_LIGHT, DEPS_HIGHLIGHT
from blockrender.utils.html_utils import escape_html, html_attrs
from blockrender.utils.lazy import LazyModule

logger = logging.getLogger(__name__)

_install_name, _import_name, _version_spec = DEPS_HIGHLIGHT[0]
pygments_module = LazyModule(_import_name, _install_name, _version_spec, feature_name="syntax highlighting")


@runtime_checkable
class SyntaxHighlighter(Protocol):
    """Contract for syntax highlighting collaborators."""

    def highlight(self, language: str, code: str, theme: str) -> str:
        """Return HTML markup for ``code``."""
        ...


class PlainHighlighter:
    """Escapes code into ``<pre><code>`` without any coloring."""

    def highlight(self, language: str, code: str, theme: str) -> str:
        """Return escaped code with a ``language-*`` class for client-side tools."""
        attrs = html_attrs({"class": f"language-{language}" if language else ""})
        return f"<pre><code{attrs}>{escape_html(code)}</code></pre>"


class PygmentsHighlighter:
    """Highlight code with Pygments using inline styles.

    Inline styles keep every fragment self-contained: no stylesheet has to
    be shipped alongside the rendered HTML.

    Parameters
    ----------
    show_line_numbers : bool, default False
        Prefix each line with its number

    """

    def __init__(self, show_line_numbers: bool = False):
        self.show_line_numbers = show_line_numbers

    def _get_lexer(self, language: str) -> Any:
        from pygments.lexers import TextLexer, get_lexer_by_name
        from pygments.util import ClassNotFound

        if not language:
            return TextLexer()
        try:
            return get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug("No Pygments lexer for %r, using plain text", language)
            return TextLexer()

    def _resolve_style(self, theme: str) -> str:
        from pygments.styles import get_style_by_name
        from pygments.util import ClassNotFound

        try:
            get_style_by_name(theme)
        except ClassNotFound:
            logger.warning("Unknown Pygments style %r, using %r", theme, DEFAULT_CODE_THEME_LIGHT)
            return DEFAULT_CODE_THEME_LIGHT
        return theme

    def highlight(self, language: str, code: str, theme: str) -> str:
        """Highlight ``code`` as ``language`` with the Pygments style ``theme``.

        Parameters
        ----------
        language : str
            Canonical language name; unknown names fall back to plain text
        code : str
            Source code
        theme : str
            Pygments style name

        Returns
        -------
        str
            HTML markup produced by Pygments' HtmlFormatter

        Raises
        ------
        DependencyError
            If Pygments is not installed

        """
        pygments = pygments_module.get()
        from pygments.formatters import HtmlFormatter

        formatter = HtmlFormatter(
            style=self._resolve_style(theme),
            noclasses=True,
            linenos="inline" if self.show_line_numbers else False,
            wrapcode=True,
        )
        return pygments.highlight(code, self._get_lexer(language), formatter)
