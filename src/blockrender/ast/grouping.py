#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/ast/grouping.py
"""Grouping of flat list items into lists, with document-wide heading numbering.

Block editors store list items as flat siblings: three consecutive bullet
items are three blocks, not one list. Before rendering, consecutive items of
the same list kind are gathered into a single group, and every heading takes
the next index from a counter shared by the whole document.

The transform walks each sibling sequence once, in order:

- a bullet item closes any open numbered run and joins the bullet run
- a numbered item closes any open bullet run and joins the numbered run
- any other block closes both runs and is emitted on its own; a heading
  takes the next heading index as it is emitted
- both runs are closed at the end of the sequence

Nested ``children`` are grouped as soon as their parent is reached, with a
context one level deeper that shares the same heading counter. Heading
indices are therefore assigned in document (pre-order) order, and are unique
across the whole document.

Examples
--------
    >>> from blockrender.ast.nodes import BulletListItem, Heading, Paragraph
    >>> units = group_blocks(
    ...     [Heading(id="a", level=2), BulletListItem(id="b"), BulletListItem(id="c"), Paragraph(id="d")],
    ...     RenderContext.create(start_heading_index=2),
    ... )
    >>> [type(unit).__name__ for unit in units]
    ['IndexedHeading', 'BulletGroup', 'Standalone']

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from blockrender.ast.nodes import Block, BulletListItem, Heading, NumberedListItem
from blockrender.constants import DEFAULT_START_HEADING_INDEX


class HeadingCounter:
    """Post-incrementing counter shared by every context of one render pass."""

    def __init__(self, start: int = DEFAULT_START_HEADING_INDEX):
        self.value = start

    def take(self) -> int:
        """Return the current value and advance the counter."""
        index = self.value
        self.value += 1
        return index


@dataclass
class RenderContext:
    """Accumulator threaded through grouping and rendering.

    Parameters
    ----------
    counter : HeadingCounter
        Document-wide heading counter
    level : int, default 0
        Nesting depth of the sequence being processed

    """

    counter: HeadingCounter = field(default_factory=HeadingCounter)
    level: int = 0

    @classmethod
    def create(cls, start_heading_index: int = DEFAULT_START_HEADING_INDEX) -> RenderContext:
        """Start a fresh context for one document."""
        return cls(counter=HeadingCounter(start_heading_index))

    @property
    def next_heading_index(self) -> int:
        """Index the next heading will receive."""
        return self.counter.value

    def take_heading_index(self) -> int:
        """Return the next heading index and advance the shared counter."""
        return self.counter.take()

    def nested(self) -> RenderContext:
        """Context for children: one level deeper, same counter."""
        return RenderContext(counter=self.counter, level=self.level + 1)


@dataclass
class GroupedItem:
    """A list item together with its grouped children."""

    block: Block
    children: list[RenderUnit] = field(default_factory=list)


@dataclass
class BulletGroup:
    """Run of consecutive bullet items rendered as one unordered list."""

    items: list[GroupedItem]
    key: str
    level: int = 0

    @property
    def blocks(self) -> list[Block]:
        """The grouped list item blocks, in order."""
        return [item.block for item in self.items]


@dataclass
class NumberedGroup:
    """Run of consecutive numbered items rendered as one ordered list."""

    items: list[GroupedItem]
    key: str
    level: int = 0

    @property
    def blocks(self) -> list[Block]:
        """The grouped list item blocks, in order."""
        return [item.block for item in self.items]


@dataclass
class IndexedHeading:
    """Heading block paired with its document-wide index."""

    block: Heading
    index: int
    children: list[RenderUnit] = field(default_factory=list)
    level: int = 0


@dataclass
class Standalone:
    """Any other block, rendered on its own."""

    block: Block
    children: list[RenderUnit] = field(default_factory=list)
    level: int = 0


RenderUnit = Union[BulletGroup, NumberedGroup, IndexedHeading, Standalone]


def bullet_group_key(first: Block) -> str:
    """Key of a bullet group, derived from its first item's id."""
    return f"bullet-group-{first.id}"


def numbered_group_key(first: Block) -> str:
    """Key of a numbered group, derived from its first item's id."""
    return f"numbered-group-{first.id}"


def group_blocks(blocks: list[Block], context: Optional[RenderContext] = None) -> list[RenderUnit]:
    """Group a sibling sequence into render units.

    Parameters
    ----------
    blocks : list of Block
        Sibling blocks in document order
    context : RenderContext, optional
        Shared accumulator; a fresh one starting at the default heading
        index is created when omitted

    Returns
    -------
    list of RenderUnit
        Units in document order. Every input block appears in exactly one
        unit, and the relative order of blocks is preserved.

    """
    if context is None:
        context = RenderContext.create()

    units: list[RenderUnit] = []
    bullets: list[GroupedItem] = []
    numbered: list[GroupedItem] = []

    def flush_bullets() -> None:
        if bullets:
            units.append(BulletGroup(items=list(bullets), key=bullet_group_key(bullets[0].block), level=context.level))
            bullets.clear()

    def flush_numbered() -> None:
        if numbered:
            units.append(
                NumberedGroup(items=list(numbered), key=numbered_group_key(numbered[0].block), level=context.level)
            )
            numbered.clear()

    for block in blocks:
        if isinstance(block, BulletListItem):
            flush_numbered()
            bullets.append(GroupedItem(block=block, children=group_blocks(block.children, context.nested())))
        elif isinstance(block, NumberedListItem):
            flush_bullets()
            numbered.append(GroupedItem(block=block, children=group_blocks(block.children, context.nested())))
        else:
            flush_bullets()
            flush_numbered()
            if isinstance(block, Heading):
                index = context.take_heading_index()
                units.append(
                    IndexedHeading(
                        block=block,
                        index=index,
                        children=group_blocks(block.children, context.nested()),
                        level=context.level,
                    )
                )
            else:
                units.append(
                    Standalone(block=block, children=group_blocks(block.children, context.nested()), level=context.level)
                )

    flush_bullets()
    flush_numbered()
    return units
