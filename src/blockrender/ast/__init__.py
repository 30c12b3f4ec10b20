#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/ast/__init__.py
"""Block document tree.

This package holds the in-memory representation of a block-editor document
and the passes that run over it before rendering:

- nodes: block and inline node classes
- visitors: visitor base class for rendering passes
- serialization: defensive loading from editor JSON, and dumping back
- grouping: list grouping and document-wide heading numbering

Examples
--------
    >>> from blockrender.ast import Paragraph, StyledText, group_blocks
    >>> units = group_blocks([Paragraph(id="p1", content=[StyledText(text="Hi")])])
    >>> type(units[0]).__name__
    'Standalone'

"""

from __future__ import annotations

from blockrender.ast.grouping import (
    BulletGroup,
    GroupedItem,
    HeadingCounter,
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
    BlockProps,
    BulletListItem,
    CodeBlock,
    Diagram,
    Divider,
    File,
    Heading,
    Image,
    Inline,
    Link,
    Node,
    NumberedListItem,
    Paragraph,
    Quote,
    StyledText,
    Table,
    TableCell,
    TableContent,
    TableRow,
    TextStyles,
    UnknownBlock,
    UnknownInline,
    Video,
    iter_blocks,
)
from blockrender.ast.serialization import (
    block_to_dict,
    blocks_to_json,
    dict_to_block,
    dicts_to_blocks,
    json_to_blocks,
)
from blockrender.ast.visitors import BlockVisitor

__all__ = [
    # Nodes
    "Audio",
    "Block",
    "BlockProps",
    "BulletListItem",
    "CodeBlock",
    "Diagram",
    "Divider",
    "File",
    "Heading",
    "Image",
    "Inline",
    "Link",
    "Node",
    "NumberedListItem",
    "Paragraph",
    "Quote",
    "StyledText",
    "Table",
    "TableCell",
    "TableContent",
    "TableRow",
    "TextStyles",
    "UnknownBlock",
    "UnknownInline",
    "Video",
    "iter_blocks",
    # Visitors
    "BlockVisitor",
    # Serialization
    "block_to_dict",
    "blocks_to_json",
    "dict_to_block",
    "dicts_to_blocks",
    "json_to_blocks",
    # Grouping
    "BulletGroup",
    "GroupedItem",
    "HeadingCounter",
    "IndexedHeading",
    "NumberedGroup",
    "RenderContext",
    "RenderUnit",
    "Standalone",
    "group_blocks",
]
