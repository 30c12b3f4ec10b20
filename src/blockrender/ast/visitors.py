#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/ast/visitors.py
"""Visitor pattern implementation for block document traversal.

This module provides the visitor base class used by renderers. Visitors keep
the per-format logic out of the node classes: each node's ``accept`` method
dispatches to the matching ``visit_*`` method here.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from blockrender.ast.nodes import (
    Audio,
    BulletListItem,
    CodeBlock,
    Diagram,
    Divider,
    File,
    Heading,
    Image,
    Link,
    Node,
    NumberedListItem,
    Paragraph,
    Quote,
    StyledText,
    Table,
    UnknownBlock,
    UnknownInline,
    Video,
)


class BlockVisitor(ABC):
    """Abstract base class for block document visitors.

    Subclasses implement a ``visit_*`` method for every block and inline node
    type. Unknown block and inline nodes have concrete defaults that delegate
    to :meth:`generic_visit`, so a visitor only has to handle them when it
    wants to.

    Examples
    --------
    Visitor that collects code block languages:

        >>> class LanguageCollector(BlockVisitor):
        ...     def __init__(self):
        ...         self.languages = []
        ...
        ...     def visit_code_block(self, node):
        ...         self.languages.append(node.language)
        ...
        ...     # remaining visit_* methods return None

    """

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_quote(self, node: Quote) -> Any:
        """Visit a Quote node."""
        pass

    @abstractmethod
    def visit_bullet_list_item(self, node: BulletListItem) -> Any:
        """Visit a BulletListItem node."""
        pass

    @abstractmethod
    def visit_numbered_list_item(self, node: NumberedListItem) -> Any:
        """Visit a NumberedListItem node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_divider(self, node: Divider) -> Any:
        """Visit a Divider node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_video(self, node: Video) -> Any:
        """Visit a Video node."""
        pass

    @abstractmethod
    def visit_audio(self, node: Audio) -> Any:
        """Visit an Audio node."""
        pass

    @abstractmethod
    def visit_file(self, node: File) -> Any:
        """Visit a File node."""
        pass

    @abstractmethod
    def visit_diagram(self, node: Diagram) -> Any:
        """Visit a Diagram node."""
        pass

    @abstractmethod
    def visit_styled_text(self, node: StyledText) -> Any:
        """Visit a StyledText inline node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link inline node."""
        pass

    def visit_unknown_block(self, node: UnknownBlock) -> Any:
        """Visit a block of an unrecognised type.

        Parameters
        ----------
        node : UnknownBlock
            The unknown block

        Returns
        -------
        Any
            Result of :meth:`generic_visit`

        """
        return self.generic_visit(node)

    def visit_unknown_inline(self, node: UnknownInline) -> Any:
        """Visit an inline item of an unrecognised type."""
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
