#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/renderers/base.py
"""Base classes for block document renderers.

This module defines the abstract base class that all renderers inherit from,
and the mixin that renders inline content into a string by temporarily
capturing the visitor's output buffer.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Sequence, Union

from blockrender.ast.nodes import Block, Node
from blockrender.exceptions import InvalidOptionsError, OutputWriteError
from blockrender.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all block document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class MyCustomRenderer(BaseRenderer):
        ...     def render_to_string(self, blocks):
        ...         return "rendered output"
        ...
        ...     def render(self, blocks, output):
        ...         self.write_text_output(self.render_to_string(blocks), output)

    """

    def __init__(self, options: Optional[BaseRendererOptions] = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render_to_string(self, blocks: Sequence[Block]) -> str:
        """Render the blocks to a string.

        Parameters
        ----------
        blocks : sequence of Block
            Top-level document blocks

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, blocks: Sequence[Block], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the blocks and write the result to ``output``.

        Parameters
        ----------
        blocks : sequence of Block
            Top-level document blocks
        output : str, Path, IO[bytes] or IO[str]
            File path or open stream

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        self.write_text_output(self.render_to_string(blocks), output)

    @staticmethod
    def _validate_options_type(
        options: Optional[BaseRendererOptions], expected_type: type, renderer_name: str
    ) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream (UTF-8 for binary targets).

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hello</p>", buffer)
            >>> buffer.getvalue()
            '<p>Hello</p>'

        """
        if isinstance(output, (str, Path)):
            try:
                Path(output).write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
            return

        name = str(getattr(output, "name", "<stream>"))
        try:
            try:
                output.write(text)  # type: ignore[arg-type]
            except TypeError:
                output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        except (OSError, ValueError) as e:
            raise OutputWriteError(name, original_error=e) from e


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: Sequence[Node]) -> str:
        """Render a list of inline nodes to text.

        Parameters
        ----------
        content : sequence of Node
            Inline nodes to render; None-safe callers pass ``[]``

        Returns
        -------
        str
            Rendered inline content as a string

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
