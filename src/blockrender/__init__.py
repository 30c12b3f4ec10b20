"""blockrender - Render block-editor documents to HTML.

blockrender turns the JSON tree persisted by a BlockNote-style block editor
into presentational HTML that carries utility classes. Documents come from
untrusted storage, so every field may be missing or malformed; the renderer
degrades gracefully and never raises for a bad node.

Key Features
------------
- Defensive loading of editor JSON into typed block nodes
- Grouping of flat list items into nested ``<ul>``/``<ol>`` containers
- Document-wide heading anchors and a matching table of contents
- Table layout with exact percentage column widths
- Pygments syntax highlighting, loaded on first use
- Translated labels (English and Chinese catalogs built in)

Requirements
------------
- Python 3.10+

Examples
--------
Render a JSON document:

    >>> from blockrender import render_document
    >>> html = render_document('[{"id": "h", "type": "heading", "props": {"level": 2}, "content": "Intro"}]')
    >>> html.startswith('<h2 id="h2-2"')
    True

Use the renderer directly:

    >>> from blockrender import HtmlRenderer, HtmlRendererOptions
    >>> renderer = HtmlRenderer(HtmlRendererOptions(standalone=True, include_toc=True))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from blockrender.anchors import TocItem, generate_heading_id
from blockrender.api import extract_toc, load_blocks, render_blocks, render_document
from blockrender.ast.serialization import json_to_blocks
from blockrender.exceptions import (
    BlockRenderError,
    ConfigError,
    DiagramRenderError,
    DependencyError,
    DocumentLoadError,
    InvalidOptionsError,
    OutputWriteError,
)
from blockrender.options import HtmlRendererOptions
from blockrender.renderers.html import HtmlRenderer

__all__ = [
    "__version__",
    "BlockRenderError",
    "ConfigError",
    "DiagramRenderError",
    "DependencyError",
    "DocumentLoadError",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "OutputWriteError",
    "TocItem",
    "extract_toc",
    "generate_heading_id",
    "json_to_blocks",
    "load_blocks",
    "render_blocks",
    "render_document",
]
