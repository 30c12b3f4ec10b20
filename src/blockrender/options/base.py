"""Base classes for renderer options.

This module defines the foundation classes for the options used by the
blockrender renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from blockrender.constants import DEFAULT_COLOR_SCHEME, DEFAULT_LOCALE, DEFAULT_START_HEADING_INDEX, ColorScheme

COLOR_SCHEMES: tuple[str, ...] = ("light", "dark")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    locale : str, default "en"
        Locale used for translated labels (copy button, default alt text,
        diagram errors)
    color_scheme : {"light", "dark"}, default "light"
        Selects themes and color variants; never changes document structure
    start_heading_index : int, default 2
        Index given to the first heading of a document. Lower indices are
        reserved for the page title and summary anchors.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    locale: str = field(
        default=DEFAULT_LOCALE,
        metadata={"help": "Locale for translated labels (e.g. 'en', 'zh')", "importance": "core"},
    )
    color_scheme: ColorScheme = field(
        default=DEFAULT_COLOR_SCHEME,
        metadata={
            "help": "Color scheme used for code and diagram themes",
            "choices": list(COLOR_SCHEMES),
            "importance": "core",
        },
    )
    start_heading_index: int = field(
        default=DEFAULT_START_HEADING_INDEX,
        metadata={
            "help": "Index of the first heading anchor (lower ids are reserved for title and summary)",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate shared renderer option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.color_scheme not in COLOR_SCHEMES:
            raise ValueError(f"color_scheme must be one of {COLOR_SCHEMES}, got {self.color_scheme!r}")
        if not isinstance(self.start_heading_index, int) or self.start_heading_index < 0:
            raise ValueError(f"start_heading_index must be a non-negative integer, got {self.start_heading_index!r}")
        if not self.locale:
            raise ValueError("locale must be a non-empty string")
