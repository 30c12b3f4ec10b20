#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/ast/nodes.py
"""Node classes for block-editor documents.

This module defines the node hierarchy used to represent a persisted
block-editor document. The tree is a closed tagged union: every block type the
renderer understands has its own class, and anything else is carried as an
``UnknownBlock`` so that a document written by a newer editor still loads.

The nodes are plain mutable dataclasses, but the rendering engine never
mutates them. Every field that the editor may omit has a default, so a node
built from a sparse or damaged payload is always well-formed.

Node Hierarchy
--------------
Block nodes (carry ``id``, ``props`` and nested ``children``):
    - Paragraph, Heading, Quote
    - BulletListItem, NumberedListItem
    - CodeBlock, Table, Divider
    - Image, Video, Audio, File, Diagram
    - UnknownBlock

Inline nodes:
    - StyledText, Link, UnknownInline

Table content (plain data, visited through ``Table``):
    - TableContent, TableRow, TableCell

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from blockrender.constants import (
    BLOCK_AUDIO,
    BLOCK_BULLET_ITEM,
    BLOCK_CODE,
    BLOCK_DIAGRAM,
    BLOCK_DIVIDER,
    BLOCK_FILE,
    BLOCK_HEADING,
    BLOCK_IMAGE,
    BLOCK_NUMBERED_ITEM,
    BLOCK_PARAGRAPH,
    BLOCK_QUOTE,
    BLOCK_TABLE,
    BLOCK_VIDEO,
)


class Node(ABC):
    """Base class for all document nodes.

    All nodes support the visitor pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Styles and properties
# ============================================================================


@dataclass
class TextStyles:
    """Inline styling flags and colors attached to a text run.

    Parameters
    ----------
    bold, italic, underline, strike, code : bool, default = False
        Boolean formatting flags
    text_color : str or None, default = None
        Named foreground color
    background_color : str or None, default = None
        Named background color

    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False
    code: bool = False
    text_color: Optional[str] = None
    background_color: Optional[str] = None


@dataclass
class BlockProps:
    """Presentation properties shared by every block.

    Parameters
    ----------
    text_color : str or None, default = None
        Named foreground color for the block
    background_color : str or None, default = None
        Named background color for the block
    text_alignment : str or None, default = None
        One of ``left``, ``center``, ``right``, ``justify``
    extra : dict, default = empty dict
        Properties the engine does not interpret, kept for round-tripping

    """

    text_color: Optional[str] = None
    background_color: Optional[str] = None
    text_alignment: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class StyledText(Node):
    """A run of text carrying a single set of styles.

    Parameters
    ----------
    text : str, default = ""
        Raw (unescaped) text
    styles : TextStyles, default = TextStyles()
        Formatting applied to the whole run

    """

    text: str = ""
    styles: TextStyles = field(default_factory=TextStyles)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_styled_text``."""
        return visitor.visit_styled_text(self)


@dataclass
class Link(Node):
    """Hyperlink wrapping one or more text runs.

    Parameters
    ----------
    href : str, default = ""
        Link target; an empty href makes the link unrenderable
    content : list of StyledText, default = empty list
        Link text runs

    """

    href: str = ""
    content: list[StyledText] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class UnknownInline(Node):
    """Inline item of a type the engine does not recognise.

    Parameters
    ----------
    type_name : str, default = ""
        Original ``type`` tag, if any
    raw : dict, default = empty dict
        Original payload

    """

    type_name: str = ""
    raw: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unknown_inline``."""
        return visitor.visit_unknown_inline(self)


Inline = Union[StyledText, Link, UnknownInline]


# ============================================================================
# Table content
# ============================================================================


@dataclass
class TableCell:
    """Single table cell.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Inline content of the cell
    colspan : int, default = 1
        Number of columns the cell spans
    rowspan : int, default = 1
        Number of rows the cell spans
    props : BlockProps, default = BlockProps()
        Cell colors and alignment

    """

    content: list[Inline] = field(default_factory=list)
    colspan: int = 1
    rowspan: int = 1
    props: BlockProps = field(default_factory=BlockProps)

    @property
    def is_spanning(self) -> bool:
        """Return True when the cell spans more than one row or column."""
        return self.colspan > 1 or self.rowspan > 1


@dataclass
class TableRow:
    """Row of table cells."""

    cells: list[TableCell] = field(default_factory=list)


@dataclass
class TableContent:
    """Column widths and rows of a table.

    Parameters
    ----------
    column_widths : list of float or None, default = empty list
        Pixel width per column; ``None`` marks an unsized column
    rows : list of TableRow, default = empty list
        Rows in document order; the first row is the header

    """

    column_widths: list[Optional[float]] = field(default_factory=list)
    rows: list[TableRow] = field(default_factory=list)


# ============================================================================
# Block Nodes
# ============================================================================


@dataclass
class Block(Node):
    """Common fields of every block node.

    Parameters
    ----------
    id : str, default = ""
        Stable identifier taken verbatim from the source document
    props : BlockProps, default = BlockProps()
        Colors and alignment of the block
    children : list of Block, default = empty list
        Nested blocks rendered after the block's own content

    """

    block_type: ClassVar[str] = ""

    id: str = ""
    props: BlockProps = field(default_factory=BlockProps)
    children: list["Block"] = field(default_factory=list)


@dataclass
class Paragraph(Block):
    """Paragraph of inline content."""

    block_type: ClassVar[str] = BLOCK_PARAGRAPH

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Block):
    """Heading block.

    Unlike most document models, the level is not validated on construction:
    editor payloads may carry a missing or out-of-range level, and the
    renderer decides how to present it.

    Parameters
    ----------
    level : int or None, default = None
        Requested heading level; ``None`` when absent or not an integer
    content : list of Inline, default = empty list
        Heading text

    """

    block_type: ClassVar[str] = BLOCK_HEADING

    level: Optional[int] = None
    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Quote(Block):
    """Block quotation."""

    block_type: ClassVar[str] = BLOCK_QUOTE

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_quote``."""
        return visitor.visit_quote(self)


@dataclass
class BulletListItem(Block):
    """Item of an unordered list; consecutive items form one list."""

    block_type: ClassVar[str] = BLOCK_BULLET_ITEM

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bullet_list_item``."""
        return visitor.visit_bullet_list_item(self)


@dataclass
class NumberedListItem(Block):
    """Item of an ordered list; consecutive items form one list."""

    block_type: ClassVar[str] = BLOCK_NUMBERED_ITEM

    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_numbered_list_item``."""
        return visitor.visit_numbered_list_item(self)


@dataclass
class CodeBlock(Block):
    """Source code listing.

    Parameters
    ----------
    language : str or None, default = None
        Language tag as stored by the editor (may be a short alias)
    content : list of Inline, default = empty list
        Code text; only plain text runs contribute

    """

    block_type: ClassVar[str] = BLOCK_CODE

    language: Optional[str] = None
    content: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass
class Table(Block):
    """Table block; ``table`` is None when the payload had no usable content."""

    block_type: ClassVar[str] = BLOCK_TABLE

    table: Optional[TableContent] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)


@dataclass
class Divider(Block):
    """Horizontal rule."""

    block_type: ClassVar[str] = BLOCK_DIVIDER

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_divider``."""
        return visitor.visit_divider(self)


@dataclass
class Image(Block):
    """Image with optional caption.

    Parameters
    ----------
    src : str or None, default = None
        Image URL; the block renders nothing without it
    alt : str or None, default = None
        Alternative text
    caption : str or None, default = None
        Caption shown under the image
    width, height : int, str or None, default = None
        Intrinsic size as stored by the editor
    alignment : str or None, default = None
        Horizontal placement
    object_fit : str or None, default = None
        CSS object-fit value

    """

    block_type: ClassVar[str] = BLOCK_IMAGE

    src: Optional[str] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    width: Union[int, str, None] = None
    height: Union[int, str, None] = None
    alignment: Optional[str] = None
    object_fit: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass
class Video(Block):
    """Video given either as a media URL or as embed (iframe) markup."""

    block_type: ClassVar[str] = BLOCK_VIDEO

    source: Optional[str] = None
    width: Union[int, str, None] = None
    height: Union[int, str, None] = None
    title: Optional[str] = None
    alignment: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_video``."""
        return visitor.visit_video(self)


@dataclass
class Audio(Block):
    """Audio clip with optional title and artist."""

    block_type: ClassVar[str] = BLOCK_AUDIO

    source: Optional[str] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    alignment: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_audio``."""
        return visitor.visit_audio(self)


@dataclass
class File(Block):
    """Downloadable attachment.

    Parameters
    ----------
    filename : str or None, default = None
        Stored file name, used to build the download URL
    original_name : str or None, default = None
        Name shown to the reader
    size : int or None, default = None
        Size in bytes
    extension : str or None, default = None
        Extension including the leading dot, e.g. ``.pdf``
    alignment : str or None, default = None
        Horizontal placement

    """

    block_type: ClassVar[str] = BLOCK_FILE

    filename: Optional[str] = None
    original_name: Optional[str] = None
    size: Optional[int] = None
    extension: Optional[str] = None
    alignment: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_file``."""
        return visitor.visit_file(self)


@dataclass
class Diagram(Block):
    """Diagram described by source code and rendered by a diagram collaborator."""

    block_type: ClassVar[str] = BLOCK_DIAGRAM

    code: Optional[str] = None
    theme: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_diagram``."""
        return visitor.visit_diagram(self)


@dataclass
class UnknownBlock(Block):
    """Block of a type the engine does not recognise; renders nothing.

    Parameters
    ----------
    type_name : str, default = ""
        Original ``type`` tag
    raw : dict, default = empty dict
        Original payload, kept so the block can be dumped back unchanged

    """

    type_name: str = ""
    raw: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unknown_block``."""
        return visitor.visit_unknown_block(self)


BLOCK_CLASSES: dict[str, type[Block]] = {
    cls.block_type: cls
    for cls in (
        Paragraph,
        Heading,
        Quote,
        BulletListItem,
        NumberedListItem,
        CodeBlock,
        Table,
        Divider,
        Image,
        Video,
        Audio,
        File,
        Diagram,
    )
}


def iter_blocks(blocks: list[Block]) -> Iterator[Block]:
    """Yield blocks in document (pre-order) order, descending into children.

    Parameters
    ----------
    blocks : list of Block
        Top-level blocks

    Yields
    ------
    Block
        Each block followed by its descendants

    """
    for block in blocks:
        yield block
        yield from iter_blocks(block.children)
