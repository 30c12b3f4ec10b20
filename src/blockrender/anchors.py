#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Heading anchors and table-of-contents extraction.

Anchor ids depend only on the heading level and its position among all
headings of the document, never on heading text, so two headings with the
same text still get distinct anchors and editing a heading's wording does
not break links to it.

The table of contents walks the document with the same numbering rule as the
renderer: pre-order, children included, every heading node consuming one
index whether or not it renders. A TOC entry therefore always points at the
anchor the renderer emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from blockrender.ast.nodes import Block, Heading, Inline, Link, StyledText, iter_blocks
from blockrender.constants import DEFAULT_START_HEADING_INDEX


@dataclass(frozen=True)
class TocItem:
    """One table-of-contents entry.

    Parameters
    ----------
    id : str
        Anchor id of the heading
    text : str
        Plain heading text
    level : int
        Effective heading level (1-6)

    """

    id: str
    text: str
    level: int


def generate_heading_id(level: int, index: int) -> str:
    """Build the anchor id for a heading.

    Parameters
    ----------
    level : int
        Heading level
    index : int
        Document-wide heading index

    Returns
    -------
    str
        ``"h{level}-{index}"``

    Examples
    --------
    >>> generate_heading_id(2, 5)
    'h2-5'

    """
    return f"h{level}-{index}"


def effective_heading_level(level: Optional[int]) -> Optional[int]:
    """Clamp a heading level into 1-6; None stays None."""
    if level is None:
        return None
    return min(max(level, 1), 6)


def extract_text(content: list[Inline]) -> str:
    """Concatenate the plain text of inline content, including link text."""
    parts: list[str] = []
    for item in content:
        if isinstance(item, StyledText):
            parts.append(item.text)
        elif isinstance(item, Link):
            parts.extend(text.text for text in item.content)
    return "".join(parts)


def extract_toc(blocks: list[Block], start_index: int = DEFAULT_START_HEADING_INDEX) -> list[TocItem]:
    """Collect table-of-contents entries for every renderable heading.

    Parameters
    ----------
    blocks : list of Block
        Document blocks
    start_index : int, default 2
        Index given to the first heading; must match the renderer's start

    Returns
    -------
    list of TocItem
        Entries in document order

    """
    items: list[TocItem] = []
    index = start_index
    for block in iter_blocks(blocks):
        if not isinstance(block, Heading):
            continue
        heading_index = index
        index += 1

        level = effective_heading_level(block.level)
        text = extract_text(block.content)
        if level is None or not block.content:
            continue
        items.append(TocItem(id=generate_heading_id(level, heading_index), text=text, level=level))
    return items
