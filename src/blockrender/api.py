"""The main exported API functions for rendering block documents."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/blockrender/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Sequence, Union

from blockrender.anchors import TocItem
from blockrender.anchors import extract_toc as _extract_toc
from blockrender.ast.nodes import Block
from blockrender.ast.serialization import dict_to_block, json_to_blocks
from blockrender.constants import DEFAULT_COLOR_SCHEME, DEFAULT_LOCALE, DEFAULT_START_HEADING_INDEX
from blockrender.exceptions import DocumentLoadError
from blockrender.options.html import HtmlRendererOptions
from blockrender.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)

DocumentInput = Union[str, bytes, Sequence[Any]]


def load_blocks(document: DocumentInput) -> list[Block]:
    """Normalize a document given as JSON, dicts or nodes into block nodes.

    Parameters
    ----------
    document : str, bytes or sequence
        A JSON string, a list of editor block dicts, or a list of
        :class:`~blockrender.ast.nodes.Block` nodes. Lists may mix nodes
        and dicts.

    Returns
    -------
    list of Block
        Top-level blocks

    Raises
    ------
    DocumentLoadError
        If a JSON string cannot be parsed, or the input is not a sequence

    """
    if isinstance(document, (str, bytes)):
        return json_to_blocks(document)
    if not isinstance(document, Sequence):
        raise DocumentLoadError(f"Expected JSON text or a list of blocks, got {type(document).__name__}")

    blocks: list[Block] = []
    for position, item in enumerate(document):
        block = item if isinstance(item, Block) else dict_to_block(item, str(position))
        if block is not None:
            blocks.append(block)
    return blocks


def render_blocks(blocks: DocumentInput, options: Optional[HtmlRendererOptions] = None) -> str:
    """Render a document with explicit options.

    Parameters
    ----------
    blocks : str, bytes or sequence
        Document in any form accepted by :func:`load_blocks`
    options : HtmlRendererOptions, optional
        Rendering options; defaults are used when omitted

    Returns
    -------
    str
        Rendered HTML

    """
    return HtmlRenderer(options).render_to_string(load_blocks(blocks))


def render_document(
    blocks: DocumentInput,
    *,
    locale: str = DEFAULT_LOCALE,
    color_scheme: str = DEFAULT_COLOR_SCHEME,
    options: Optional[HtmlRendererOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
) -> str:
    """Render a block document to HTML.

    Parameters
    ----------
    blocks : str, bytes or sequence
        Document as JSON text, editor dicts, or block nodes
    locale : str, default "en"
        Locale for translated labels; ignored when ``options`` is given
    color_scheme : {"light", "dark"}, default "light"
        Color scheme; ignored when ``options`` is given
    options : HtmlRendererOptions, optional
        Full rendering options
    output : str, Path, IO, optional
        When given, the HTML is also written to this path or stream

    Returns
    -------
    str
        Rendered HTML

    Examples
    --------
    >>> render_document('[{"id": "p", "type": "paragraph", "content": "Hi"}]')
    '<section><p class="mb-4 leading-relaxed">Hi</p></section>\\n'

    """
    if options is None:
        options = HtmlRendererOptions(locale=locale, color_scheme=color_scheme)  # type: ignore[arg-type]

    renderer = HtmlRenderer(options)
    html = renderer.render_to_string(load_blocks(blocks))
    if output is not None:
        renderer.write_text_output(html, output)
    return html


def extract_toc(blocks: DocumentInput, start_index: int = DEFAULT_START_HEADING_INDEX) -> list[TocItem]:
    """Collect the table of contents of a document.

    The entries carry the same anchor ids the renderer assigns.
    """
    return _extract_toc(load_blocks(blocks), start_index=start_index)


__all__ = [
    "DocumentInput",
    "extract_toc",
    "load_blocks",
    "render_blocks",
    "render_document",
]
