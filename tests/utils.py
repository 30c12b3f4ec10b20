"""Test utilities for the blockrender test suite.

This module provides small builders for block and inline nodes so tests can
describe documents compactly.
"""

from blockrender.ast.nodes import (
    BulletListItem,
    Heading,
    Link,
    NumberedListItem,
    Paragraph,
    StyledText,
    TableCell,
    TableContent,
    TableRow,
    TextStyles,
)


def text(value: str, **styles) -> StyledText:
    """Build a styled text run."""
    return StyledText(text=value, styles=TextStyles(**styles))


def link(href: str, *values: str) -> Link:
    """Build a link over plain text runs."""
    return Link(href=href, content=[text(value) for value in values])


def paragraph(block_id: str, value: str = "text", children=None) -> Paragraph:
    """Build a paragraph holding a single text run."""
    return Paragraph(id=block_id, content=[text(value)], children=children or [])


def heading(block_id: str, level=2, value: str = "Title", children=None) -> Heading:
    """Build a heading; an empty ``value`` gives a heading without content."""
    return Heading(id=block_id, level=level, content=[text(value)] if value else [], children=children or [])


def bullet(block_id: str, value: str = "item", children=None) -> BulletListItem:
    """Build a bullet list item."""
    return BulletListItem(id=block_id, content=[text(value)], children=children or [])


def numbered(block_id: str, value: str = "item", children=None) -> NumberedListItem:
    """Build a numbered list item."""
    return NumberedListItem(id=block_id, content=[text(value)], children=children or [])


def table_content(rows, column_widths=None) -> TableContent:
    """Build table content from rows of cell texts (None gives an empty cell)."""
    return TableContent(
        column_widths=list(column_widths or []),
        rows=[TableRow(cells=[TableCell(content=[text(c)] if c else []) for c in row]) for row in rows],
    )
