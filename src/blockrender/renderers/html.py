#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/renderers/html.py
"""HTML rendering of block documents.

This module provides the HtmlRenderer class which converts block nodes into
presentational HTML carrying utility classes. The renderer produces
fragments for embedding into an existing page, or standalone documents.

Rendering runs in two steps. The block list is first grouped (see
:mod:`blockrender.ast.grouping`): consecutive list items become lists and
every heading receives its document-wide index. The resulting units are then
visited in order. Each renderer instance keeps per-pass state (output buffer,
heading counter, diagram cache, collected TOC entries) that is reset at the
start of every :meth:`HtmlRenderer.render_to_string` call, so an instance
must not be shared between threads while rendering.

Malformed blocks never raise: a block missing what it needs renders as
nothing. Failures of the highlighting and diagram collaborators are isolated
to the block that triggered them.

"""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath
from typing import Optional, Sequence, Union
from urllib.parse import quote

from blockrender.anchors import TocItem, effective_heading_level, extract_text, generate_heading_id
from blockrender.ast.grouping import (
    BulletGroup,
    GroupedItem,
    IndexedHeading,
    NumberedGroup,
    RenderContext,
    RenderUnit,
    Standalone,
    group_blocks,
)
from blockrender.ast.nodes import (
    Audio,
    Block,
    BulletListItem,
    CodeBlock,
    Diagram,
    Divider,
    File,
    Heading,
    Image,
    Link,
    NumberedListItem,
    Paragraph,
    Quote,
    StyledText,
    Table,
    TableCell,
    UnknownBlock,
    UnknownInline,
    Video,
)
from blockrender.ast.visitors import BlockVisitor
from blockrender.constants import (
    CHILDREN_CONTAINER_CLASSES,
    CODE_LANGUAGE_ALIASES,
    DEFAULT_DIAGRAM_THEME_DARK,
    DEFAULT_DIAGRAM_THEME_LIGHT,
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_OBJECT_FIT,
    DEFAULT_VIDEO_HEIGHT,
    DEFAULT_VIDEO_WIDTH,
    DIVIDER_CLASSES,
    FIGCAPTION_CLASSES,
    FILE_ALIGNMENT_CLASSES,
    LINK_CLASSES,
    LIST_CONTAINER_CLASSES,
    LIST_ITEM_CLASSES,
    MEDIA_FRAME_CLASSES,
    MEDIA_JUSTIFY_CLASSES,
    MEDIA_JUSTIFY_DEFAULT,
    OBJECT_FIT_VALUES,
    PARAGRAPH_CLASSES,
    QUOTE_CLASSES,
    QUOTE_SPACING_CLASSES,
    TABLE_BODY_ROW_CLASSES,
    TABLE_CARD_CLASSES,
    TABLE_CLASSES,
    TABLE_EMPTY_CELL_CLASSES,
    TABLE_SCROLL_CLASSES,
    TABLE_WRAPPER_CLASSES,
)
from blockrender.diagrams import ClientSideDiagramRenderer, DiagramCache, DiagramRenderer
from blockrender.highlight import PlainHighlighter, PygmentsHighlighter, SyntaxHighlighter
from blockrender.i18n import Translator
from blockrender.options.html import HtmlRendererOptions
from blockrender.renderers.base import BaseRenderer, InlineContentMixin
from blockrender.styles import block_classes, bullet_list_class, class_string, heading_classes, numbered_list_class
from blockrender.table_layout import compute_column_layout, plan_cell
from blockrender.utils.decorators import debug_timer
from blockrender.utils.html_utils import (
    escape_html,
    file_type_color,
    format_bytes,
    get_file_category,
    html_attrs,
    is_safe_url,
    sanitize_iframe_html,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_CSS_LENGTH = re.compile(r"^(\d+(?:\.\d+)?)(px|vw|vh|%)$")

_CODE_FIGURE_CLASSES = "relative my-4 w-full"
_CODE_TOOLBAR_CLASSES = "absolute top-2 right-2 z-10 flex items-center gap-2"
_CODE_BADGE_CLASSES = (
    "inline-flex items-center rounded-md border border-gray-200 bg-gray-100 px-2 py-0.5 text-xs font-medium "
    "text-gray-700 dark:border-gray-700 dark:bg-gray-800 dark:text-gray-200"
)
_COPY_BUTTON_CLASSES = "rounded-md bg-gray-700 px-3 py-1 text-xs text-white transition hover:bg-gray-600"
_DIAGRAM_FIGURE_CLASSES = "my-4 w-full"
_DIAGRAM_ERROR_CLASSES = (
    "rounded-lg border border-red-200 bg-red-50 p-4 text-sm text-red-700 "
    "dark:border-red-800 dark:bg-red-900/20 dark:text-red-300"
)
_FILE_CARD_CLASSES = "group flex items-center rounded-lg border p-4 transition-all duration-200 hover:shadow-md"


def _parse_dimension(value: Union[int, str, None], default: int) -> int:
    """Read an integer dimension the way ``parseInt`` would, falling back to ``default``."""
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match and int(match.group(1)) > 0:
            return int(match.group(1))
    return default


def _css_length(value: Union[int, str, None], default: str, *, zero_means_full: bool = False) -> str:
    """Normalise a media size into a CSS length; bare numbers are pixels."""
    if value is None or value == "":
        return default
    text = str(value).strip().lower()
    if re.fullmatch(r"\d+(\.\d+)?", text):
        text = f"{text}px"
    match = _CSS_LENGTH.match(text)
    if not match:
        return default
    if zero_means_full and float(match.group(1)) == 0:
        return "100vw"
    return text


def _normalize_language(language: Optional[str]) -> str:
    if not language:
        return ""
    language = language.strip()
    return CODE_LANGUAGE_ALIASES.get(language.lower(), language)


class HtmlRenderer(BlockVisitor, InlineContentMixin, BaseRenderer):
    """Render block documents to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from blockrender.ast.nodes import Heading, StyledText
        >>> renderer = HtmlRenderer()
        >>> html = renderer.render_to_string([Heading(id="a", level=2, content=[StyledText(text="Intro")])])
        >>> html.startswith('<h2 id="h2-2"')
        True

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.translator: Translator = options.translator or Translator(options.locale)
        self.diagram_renderer: DiagramRenderer = options.diagram_renderer or ClientSideDiagramRenderer()
        self.highlighter: SyntaxHighlighter = (
            PygmentsHighlighter(show_line_numbers=options.show_line_numbers)
            if options.syntax_highlighting
            else PlainHighlighter()
        )
        self._output: list[str] = []
        self._context = RenderContext.create(options.start_heading_index)
        self._active: Optional[RenderUnit | GroupedItem] = None
        self._diagram_cache = DiagramCache()
        self._toc: list[TocItem] = []

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._output = []
        self._context = RenderContext.create(self.options.start_heading_index)
        self._active = None
        self._diagram_cache.clear()
        self._toc = []

    def render_to_string(self, blocks: Sequence[Block]) -> str:
        """Render blocks to an HTML string.

        Parameters
        ----------
        blocks : sequence of Block
            Top-level document blocks

        Returns
        -------
        str
            HTML fragment, or a complete document when ``standalone`` is set

        """
        self._reset()
        with debug_timer(logger, "Rendering HTML"):
            self._render_units(group_blocks(list(blocks), self._context))
        content = "".join(self._output)

        if self.options.standalone:
            return self._wrap_in_document(content)
        if self.options.include_toc and self._toc:
            return self._generate_toc() + content
        return content

    @property
    def toc(self) -> list[TocItem]:
        """Table-of-contents entries collected by the last render pass."""
        return list(self._toc)

    def _wrap_in_document(self, content: str) -> str:
        """Wrap content in a complete HTML document.

        Parameters
        ----------
        content : str
            Rendered HTML content

        Returns
        -------
        str
            Complete HTML document

        """
        title = self.options.title or DEFAULT_DOCUMENT_TITLE
        html_class = ' class="dark"' if self.options.color_scheme == "dark" else ""
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.options.locale)}"{html_class}>',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(title)}</title>",
            "</head>",
            "<body>",
        ]
        if self.options.include_toc and self._toc:
            parts.append(self._generate_toc())
        parts.append("<main>")
        parts.append(content)
        parts.append("</main>")
        parts.append("</body>")
        parts.append("</html>")
        return "\n".join(parts)

    def _generate_toc(self) -> str:
        """Generate table of contents HTML from the headings rendered in this pass."""
        parts = [
            f'<nav id="table-of-contents"{html_attrs({"aria-label": self.translator("article.tableOfContents")})}>',
            f"<h2>{escape_html(self.translator('article.tableOfContents'))}</h2>",
            "<ul>",
        ]
        for item in self._toc:
            parts.append(
                f'<li class="toc-level-{item.level}"><a href="#{item.id}">{escape_html(item.text)}</a></li>'
            )
        parts.append("</ul>")
        parts.append("</nav>\n")
        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Grouped rendering
    # ------------------------------------------------------------------

    def _render_units(self, units: list[RenderUnit]) -> None:
        for unit in units:
            if isinstance(unit, BulletGroup):
                self._render_group("ul", unit, bullet_list_class(unit.level))
            elif isinstance(unit, NumberedGroup):
                self._render_group("ol", unit, numbered_list_class(unit.level))
            else:
                self._accept_active(unit.block, unit)

    def _render_group(self, tag: str, group: Union[BulletGroup, NumberedGroup], marker_class: str) -> None:
        attrs = html_attrs(
            {
                "class": class_string(
                    None, None, LIST_CONTAINER_CLASSES, marker_class, self._custom_classes(type(group).__name__)
                ),
                "data-group": group.key,
            }
        )
        self._output.append(f"<{tag}{attrs}>")
        for item in group.items:
            self._accept_active(item.block, item)
        self._output.append(f"</{tag}>\n")

    def _accept_active(self, block: Block, unit: Union[RenderUnit, GroupedItem]) -> None:
        saved = self._active
        self._active = unit
        try:
            block.accept(self)
        finally:
            self._active = saved

    def _layout_for(self, node: Block) -> tuple[Optional[int], list[RenderUnit], int]:
        """Return heading index, grouped children and nesting level for ``node``.

        Blocks reached through grouping reuse what grouping computed. A block
        visited directly is grouped on the spot with the current context.
        """
        active = self._active
        if active is not None and active.block is node:
            index = active.index if isinstance(active, IndexedHeading) else None
            level = getattr(active, "level", self._context.level)
            return index, active.children, level

        index = self._context.take_heading_index() if isinstance(node, Heading) else None
        return index, group_blocks(node.children, self._context.nested()), self._context.level

    def _render_children(self, children: list[RenderUnit]) -> str:
        """Render grouped children inside the nested-content container."""
        if not children:
            return ""
        saved_output = self._output
        saved_active = self._active
        self._output = []
        self._active = None
        try:
            self._render_units(children)
            inner = "".join(self._output)
        finally:
            self._output = saved_output
            self._active = saved_active
        return f'<div class="{CHILDREN_CONTAINER_CLASSES}">{inner}</div>'

    def _custom_classes(self, name: str) -> Optional[str]:
        """Extra classes configured for a block type in ``css_class_map``."""
        if not self.options.css_class_map:
            return None
        classes = self.options.css_class_map.get(name)
        if not classes:
            return None
        return classes if isinstance(classes, str) else " ".join(classes)

    def _classes_for(self, node: Block, *extra: Optional[str]) -> str:
        return block_classes(node.props, *extra, self._custom_classes(type(node).__name__))

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def visit_styled_text(self, node: StyledText) -> None:
        """Render a text run, wrapped in a span only when it has classes."""
        if not node.text:
            return
        text = escape_html(node.text)
        classes = class_string(node.styles)
        if classes:
            self._output.append(f'<span class="{classes}">{text}</span>')
        else:
            self._output.append(text)

    def visit_link(self, node: Link) -> None:
        """Render a link; links without a target or without text render nothing."""
        if not node.href or not node.content:
            return
        content = self._render_inline_content(node.content)
        if not is_safe_url(node.href):
            logger.debug("Dropping unsafe link target %r", node.href)
            self._output.append(content)
            return
        self._output.append(f'<a{html_attrs({"href": node.href, "class": LINK_CLASSES})}>{content}</a>')

    def visit_unknown_inline(self, node: UnknownInline) -> None:
        """Unknown inline items render nothing."""
        logger.debug("Skipping unknown inline type %r", node.type_name)

    # ------------------------------------------------------------------
    # Text blocks
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph and its nested children inside a ``<section>``."""
        _, children, _ = self._layout_for(node)
        classes = self._classes_for(node, PARAGRAPH_CLASSES)
        content = self._render_inline_content(node.content)
        self._output.append(
            f"<section><p{html_attrs({'class': classes})}>{content}</p>{self._render_children(children)}</section>\n"
        )

    def visit_heading(self, node: Heading) -> None:
        """Render a heading with its anchor id.

        The level is clamped into 1-6. A heading with no level or no content
        renders nothing, but it has still consumed its index so later anchors
        do not shift.

        """
        index, children, _ = self._layout_for(node)
        level = effective_heading_level(node.level)

        if level is not None and node.content and index is not None:
            heading_id = generate_heading_id(level, index)
            classes = block_classes(node.props, heading_classes(level), self._custom_classes("Heading"))
            content = self._render_inline_content(node.content)
            self._toc.append(TocItem(id=heading_id, text=extract_text(node.content), level=level))
            self._output.append(f"<h{level}{html_attrs({'id': heading_id, 'class': classes})}>{content}</h{level}>\n")
        else:
            logger.debug("Heading %s has no usable level or content; not rendered", node.id)

        self._output.append(self._render_children(children))

    def visit_quote(self, node: Quote) -> None:
        """Render a block quotation with the fixed quote treatment."""
        _, children, _ = self._layout_for(node)
        classes = self._classes_for(node, QUOTE_CLASSES, QUOTE_SPACING_CLASSES)
        content = self._render_inline_content(node.content)
        self._output.append(f"<blockquote{html_attrs({'class': classes})}>{content}</blockquote>\n")
        self._output.append(self._render_children(children))

    def _render_list_item(self, node: Union[BulletListItem, NumberedListItem]) -> None:
        _, children, _ = self._layout_for(node)
        classes = self._classes_for(node, LIST_ITEM_CLASSES)
        content = self._render_inline_content(node.content)
        self._output.append(f"<li{html_attrs({'class': classes})}>{content}{self._render_children(children)}</li>")

    def visit_bullet_list_item(self, node: BulletListItem) -> None:
        """Render one ``<li>`` of an unordered list."""
        self._render_list_item(node)

    def visit_numbered_list_item(self, node: NumberedListItem) -> None:
        """Render one ``<li>`` of an ordered list."""
        self._render_list_item(node)

    # ------------------------------------------------------------------
    # Code, divider, table
    # ------------------------------------------------------------------

    def _highlight(self, language: str, code: str) -> str:
        try:
            return self.highlighter.highlight(language, code, self.options.code_theme)
        except Exception as e:
            logger.warning(f"Syntax highlighting failed for language {language!r}: {e}")
            return PlainHighlighter().highlight(language, code, self.options.code_theme)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a code block with language badge, copy button and highlighted code.

        Only plain text runs contribute to the code; an empty listing renders
        nothing.

        """
        _, children, _ = self._layout_for(node)
        code = "".join(item.text for item in node.content if isinstance(item, StyledText))
        if code:
            language = _normalize_language(node.language)
            t = self.translator
            figure_attrs = html_attrs(
                {
                    "class": class_string(None, None, _CODE_FIGURE_CLASSES, self._custom_classes("CodeBlock")),
                    "data-language": language,
                    "aria-label": t("article.codeSample", {"language": language or "text"}),
                }
            )
            parts = [f"<figure{figure_attrs}>", f'<div class="{_CODE_TOOLBAR_CLASSES}">']
            if language:
                parts.append(f'<span class="{_CODE_BADGE_CLASSES}" aria-hidden="true">{escape_html(language.upper())}</span>')
            button_attrs = html_attrs(
                {
                    "type": "button",
                    "class": _COPY_BUTTON_CLASSES,
                    "aria-label": t("article.copyCode", {"language": language or "text"}),
                    "data-code": code,
                    "data-copied-label": t("article.copied"),
                }
            )
            parts.append(f"<button{button_attrs}>{escape_html(t('article.copy'))}</button>")
            parts.append("</div>")
            parts.append(self._highlight(language, code))
            parts.append("</figure>\n")
            self._output.append("".join(parts))
        self._output.append(self._render_children(children))

    def visit_divider(self, node: Divider) -> None:
        """Render a horizontal rule."""
        _, children, _ = self._layout_for(node)
        self._output.append(f"<hr{html_attrs({'class': self._classes_for(node, DIVIDER_CLASSES)})}>\n")
        self._output.append(self._render_children(children))

    def _render_cell(self, cell: TableCell, is_header: bool) -> str:
        plan = plan_cell(cell, is_header)
        attrs = html_attrs(
            {
                "scope": "col" if is_header else None,
                "class": plan.classes,
                "colspan": plan.colspan,
                "rowspan": plan.rowspan,
            }
        )
        if plan.is_empty:
            content = f'<span class="{TABLE_EMPTY_CELL_CLASSES}">&nbsp;</span>'
        else:
            content = self._render_inline_content(cell.content)
        return f"<{plan.tag}{attrs}>{content}</{plan.tag}>"

    def visit_table(self, node: Table) -> None:
        """Render a table inside its card wrappers.

        The first row is the header. Columns get a ``<colgroup>`` only when
        at least one width was specified (see :mod:`blockrender.table_layout`).

        """
        _, children, _ = self._layout_for(node)
        table = node.table
        if table is None:
            logger.debug("Table %s has no content; not rendered", node.id)
            self._output.append(self._render_children(children))
            return

        layout = compute_column_layout(table.column_widths)
        parts = [
            f'<div class="{TABLE_WRAPPER_CLASSES}"><div class="{TABLE_CARD_CLASSES}"><div class="{TABLE_SCROLL_CLASSES}">',
            f"<table{html_attrs({'class': self._classes_for(node, TABLE_CLASSES)})}>",
        ]
        if layout.has_colgroup:
            cols = "".join(f"<col{html_attrs({'style': f'width:{c.style}' if c.style else None})}>" for c in layout.columns)
            parts.append(f"<colgroup>{cols}</colgroup>")

        parts.append("<thead>")
        if table.rows:
            parts.append("<tr>" + "".join(self._render_cell(cell, True) for cell in table.rows[0].cells) + "</tr>")
        parts.append("</thead>")

        parts.append("<tbody>")
        for row in table.rows[1:]:
            cells = "".join(self._render_cell(cell, False) for cell in row.cells)
            parts.append(f'<tr class="{TABLE_BODY_ROW_CLASSES}">{cells}</tr>')
        parts.append("</tbody>")
        parts.append("</table></div></div></div>\n")

        self._output.append("".join(parts))
        self._output.append(self._render_children(children))

    # ------------------------------------------------------------------
    # Media
    # ------------------------------------------------------------------

    @staticmethod
    def _justify_class(alignment: Optional[str]) -> str:
        return MEDIA_JUSTIFY_CLASSES.get(alignment or "", MEDIA_JUSTIFY_DEFAULT)

    def _figcaption(self, caption: Optional[str], classes: str = FIGCAPTION_CLASSES) -> str:
        if not caption:
            return ""
        return f'<figcaption class="{classes}">{escape_html(caption)}</figcaption>'

    def visit_image(self, node: Image) -> None:
        """Render an image figure; an image without ``src`` renders nothing."""
        _, children, _ = self._layout_for(node)
        if node.src:
            caption = (node.caption or "").strip()
            alt = (node.alt or "").strip() or caption or self.translator("article.defaultImageAlt")
            object_fit = node.object_fit if node.object_fit in OBJECT_FIT_VALUES else DEFAULT_OBJECT_FIT
            img_attrs = html_attrs(
                {
                    "src": node.src,
                    "alt": alt,
                    "width": _parse_dimension(node.width, DEFAULT_IMAGE_WIDTH),
                    "height": _parse_dimension(node.height, DEFAULT_IMAGE_HEIGHT),
                    "loading": "lazy",
                    "class": "h-auto max-w-full",
                    "style": f"object-fit:{object_fit}",
                }
            )
            self._output.append(
                f"<figure{html_attrs({'class': self._classes_for(node, 'w-full')})}>"
                f'<div class="flex w-full {self._justify_class(node.alignment)}">'
                f'<div class="{MEDIA_FRAME_CLASSES}"><img{img_attrs}>{self._figcaption(caption)}</div>'
                "</div></figure>\n"
            )
        self._output.append(self._render_children(children))

    def visit_video(self, node: Video) -> None:
        """Render a video from embed markup (sanitized) or from a media URL."""
        _, children, _ = self._layout_for(node)
        if node.source:
            caption = (node.title or "").strip()
            if "<iframe" in node.source.lower():
                width = _css_length(node.width, DEFAULT_VIDEO_WIDTH, zero_means_full=True)
                height = _css_length(node.height, DEFAULT_VIDEO_HEIGHT)
                style = f"width:{width};height:{height};overflow:hidden;line-height:0;position:relative"
                player = f"<div{html_attrs({'style': style})}>{sanitize_iframe_html(node.source)}</div>"
            else:
                video_attrs = html_attrs(
                    {
                        "src": node.source,
                        "controls": True,
                        "preload": "metadata",
                        "class": "w-full",
                        "style": "height:auto;max-height:600px",
                    }
                )
                player = f"<video{video_attrs}>{escape_html(self.translator('article.videoUnsupported'))}</video>"
            self._output.append(
                f"<figure{html_attrs({'class': self._classes_for(node, 'w-full')})}>"
                f'<div class="flex w-full {self._justify_class(node.alignment)}">'
                f'<div class="{MEDIA_FRAME_CLASSES}"><div class="relative">{player}</div>{self._figcaption(caption)}</div>'
                "</div></figure>\n"
            )
        self._output.append(self._render_children(children))

    def visit_audio(self, node: Audio) -> None:
        """Render an audio player; the caption is ``title - artist`` when both are set."""
        _, children, _ = self._layout_for(node)
        if node.source:
            caption = (node.title or "").strip()
            artist = (node.artist or "").strip()
            if caption and artist:
                caption = f"{caption} - {artist}"
            audio_attrs = html_attrs({"src": node.source, "controls": True, "class": "w-full rounded-lg"})
            self._output.append(
                f"<figure{html_attrs({'class': self._classes_for(node, 'w-full')})}>"
                f"<audio{audio_attrs}>{escape_html(self.translator('article.audioUnsupported'))}</audio>"
                f"{self._figcaption(caption, 'text-center text-sm leading-relaxed font-medium text-gray-600 dark:text-gray-300')}"
                "</figure>\n"
            )
        self._output.append(self._render_children(children))

    def visit_file(self, node: File) -> None:
        """Render a download card; a file without ``filename`` renders nothing."""
        _, children, _ = self._layout_for(node)
        if node.filename:
            extension = node.extension or PurePosixPath(node.filename).suffix
            display_name = node.original_name or node.filename
            size = format_bytes(node.size) if node.size else None
            href = f"{self.options.file_url_prefix.rstrip('/')}/{quote(node.filename)}"
            wrapper_classes = self._classes_for(node, FILE_ALIGNMENT_CLASSES.get(node.alignment or ""))

            meta = f"<span>{escape_html(extension.upper().replace('.', ''))}</span>"
            if size:
                meta += f'<span class="mx-1">•</span><span>{escape_html(size)}</span>'
            link_attrs = html_attrs(
                {
                    "href": href,
                    "target": "_blank",
                    "rel": "noopener noreferrer",
                    "title": self.translator("article.download"),
                    "download": True,
                }
            )
            card_attrs = html_attrs(
                {
                    "class": f"{_FILE_CARD_CLASSES} {file_type_color(extension)}",
                    "data-file-category": get_file_category(extension),
                }
            )
            self._output.append(
                f"<div{html_attrs({'class': wrapper_classes})}><div{card_attrs}>"
                f'<div class="min-w-0 flex-1"><p class="truncate text-sm font-medium">{escape_html(display_name)}</p>'
                f'<div class="mt-1 flex items-center text-xs opacity-75">{meta}</div></div>'
                f'<div class="ml-3 flex-shrink-0"><a{link_attrs}>{escape_html(self.translator("article.download"))}</a></div>'
                "</div></div>\n"
            )
        self._output.append(self._render_children(children))

    # ------------------------------------------------------------------
    # Diagrams and unknown blocks
    # ------------------------------------------------------------------

    def _diagram_error(self, message: str) -> str:
        return (
            f'<figure class="{_DIAGRAM_FIGURE_CLASSES}" role="alert">'
            f'<div class="{_DIAGRAM_ERROR_CLASSES}">{escape_html(message)}</div></figure>\n'
        )

    def visit_diagram(self, node: Diagram) -> None:
        """Render a diagram through the diagram collaborator.

        Results are cached per block id and theme for the current pass. A
        failing collaborator produces an inline error message for this block
        only.

        """
        _, children, _ = self._layout_for(node)
        t = self.translator
        code = (node.code or "").strip()
        default_theme = DEFAULT_DIAGRAM_THEME_DARK if self.options.color_scheme == "dark" else DEFAULT_DIAGRAM_THEME_LIGHT
        theme = node.theme or default_theme

        if not code:
            self._output.append(self._diagram_error(t("mermaid.error.noCode")))
        else:
            try:
                markup = self._diagram_cache.get_or_render(
                    node.id, theme, code, lambda: self.diagram_renderer.render(code, theme)
                )
            except Exception as e:
                logger.warning(f"Diagram {node.id} failed to render: {e}")
                detail = str(e)
                message = (
                    t("mermaid.error.mermaidRenderWithDetail", {"error": detail})
                    if detail
                    else t("mermaid.error.renderFailed")
                )
                self._output.append(self._diagram_error(message))
            else:
                attrs = html_attrs({"class": self._classes_for(node, _DIAGRAM_FIGURE_CLASSES), "data-diagram-theme": theme})
                self._output.append(f'<figure{attrs}><div class="flex justify-center overflow-x-auto">{markup}</div></figure>\n')
        self._output.append(self._render_children(children))

    def visit_unknown_block(self, node: UnknownBlock) -> None:
        """Unknown blocks render nothing themselves; their children still render."""
        _, children, _ = self._layout_for(node)
        logger.debug("Skipping unknown block type %r (%s)", node.type_name, node.id)
        self._output.append(self._render_children(children))
