#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines the options for rendering block documents to HTML
fragments and standalone pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from blockrender.constants import (
    DEFAULT_CODE_THEME_DARK,
    DEFAULT_CODE_THEME_LIGHT,
    DEFAULT_FILE_URL_PREFIX,
)
from blockrender.options.base import BaseRendererOptions

if TYPE_CHECKING:
    from blockrender.diagrams import DiagramRenderer
    from blockrender.i18n import Translator


# src/blockrender/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering block documents to HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the fragment in a complete HTML page with ``<html>``, ``<head>``
        and ``<body>``.
    include_toc : bool, default False
        Prepend a ``<nav>`` table of contents linking to the heading anchors.
    title : str or None, default None
        Page title for standalone output.
    syntax_highlighting : bool, default True
        Highlight code blocks with Pygments. When False, code is emitted as
        escaped text inside ``<pre><code>``.
    show_line_numbers : bool, default False
        Number the lines of highlighted code blocks.
    code_theme_light : str, default "solarized-light"
        Pygments style used for the light color scheme.
    code_theme_dark : str, default "dracula"
        Pygments style used for the dark color scheme.
    file_url_prefix : str, default "/files"
        URL prefix of file download links.
    css_class_map : dict[str, str | list[str]] or None, default None
        Extra classes per block type name, appended after the built-in ones.
        Example: {"Paragraph": "prose-p", "Table": ["data-table", "striped"]}
    diagram_renderer : DiagramRenderer or None, default None
        Diagram collaborator; the client-side renderer is used when None.
    translator : Translator or None, default None
        Translation collaborator; built from ``locale`` when None.

    Examples
    --------
    Standalone dark page with a table of contents:
        >>> options = HtmlRendererOptions(standalone=True, include_toc=True, color_scheme="dark")

    Custom CSS classes:
        >>> options = HtmlRendererOptions(css_class_map={"Quote": "pull-quote"})

    """

    standalone: bool = field(
        default=False,
        metadata={"help": "Generate complete HTML document (vs content fragment)", "importance": "core"},
    )
    include_toc: bool = field(
        default=False,
        metadata={"help": "Generate table of contents from headings", "importance": "core"},
    )
    title: Optional[str] = field(
        default=None,
        metadata={"help": "Page title for standalone output", "importance": "core"},
    )
    syntax_highlighting: bool = field(
        default=True,
        metadata={
            "help": "Highlight code blocks with Pygments",
            "cli_name": "no-highlight",
            "importance": "core",
        },
    )
    show_line_numbers: bool = field(
        default=False,
        metadata={"help": "Number the lines of highlighted code blocks", "importance": "advanced"},
    )
    code_theme_light: str = field(
        default=DEFAULT_CODE_THEME_LIGHT,
        metadata={"help": "Pygments style for the light color scheme", "importance": "advanced"},
    )
    code_theme_dark: str = field(
        default=DEFAULT_CODE_THEME_DARK,
        metadata={"help": "Pygments style for the dark color scheme", "importance": "advanced"},
    )
    file_url_prefix: str = field(
        default=DEFAULT_FILE_URL_PREFIX,
        metadata={"help": "URL prefix for file download links", "importance": "advanced"},
    )
    css_class_map: Optional[dict[str, str | list[str]]] = field(
        default=None,
        metadata={
            "help": 'Map block types to extra CSS classes (e.g., \'{"Paragraph": "prose-p"}\')',
            "importance": "advanced",
        },
    )
    diagram_renderer: Optional["DiagramRenderer"] = field(
        default=None,
        compare=False,
        metadata={"help": "Diagram rendering collaborator", "importance": "advanced", "exclude_from_cli": True},
    )
    translator: Optional["Translator"] = field(
        default=None,
        compare=False,
        metadata={"help": "Translation collaborator", "importance": "advanced", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate dependent field constraints.

        Raises
        ------
        ValueError
            If a field value is invalid.

        """
        super().__post_init__()

        if not self.code_theme_light or not self.code_theme_dark:
            raise ValueError("code themes must be non-empty style names")

        if self.css_class_map is not None:
            for block_name, classes in self.css_class_map.items():
                if not isinstance(classes, (str, list)):
                    raise ValueError(
                        f"css_class_map[{block_name!r}] must be a string or list of strings, "
                        f"got {type(classes).__name__}"
                    )

    @property
    def code_theme(self) -> str:
        """Pygments style matching the color scheme."""
        return self.code_theme_dark if self.color_scheme == "dark" else self.code_theme_light
