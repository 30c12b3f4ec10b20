#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for blockrender renderers.

Options are frozen dataclasses; use ``create_updated`` (or
:func:`create_updated_options`) to derive a modified copy.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from blockrender.options.base import COLOR_SCHEMES, BaseRendererOptions, CloneFrozenMixin
from blockrender.options.html import HtmlRendererOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs : Any
        Field names and their new values

    Returns
    -------
    Any
        New options instance with the updated values

    """
    return replace(options, **kwargs)


__all__ = [
    "BaseRendererOptions",
    "COLOR_SCHEMES",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "create_updated_options",
]
