#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/utils/__init__.py
"""Utility modules for the blockrender package.

This package contains HTML helpers, dependency checking, and the lazy module
handles used by the optional collaborators.
"""

from blockrender.utils.html_utils import escape_html, format_bytes, html_attrs
from blockrender.utils.lazy import LazyModule

__all__ = [
    "LazyModule",
    "escape_html",
    "format_bytes",
    "html_attrs",
]
