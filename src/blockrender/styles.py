#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Style resolution: editor styles and block props to presentation classes.

The resolver is a total function. Unknown color names, unknown alignments and
falsy extra classes are silently dropped, so any combination of inputs maps
to a (possibly empty) class list.

Token order is fixed: boolean flags (bold, italic, underline, strike, code),
then text color, then background color, then alignment, then extra classes.
"""

from __future__ import annotations

from typing import Optional

from blockrender.ast.nodes import BlockProps, TextStyles
from blockrender.constants import (
    ALIGNMENT_CLASSES,
    BULLET_LIST_STYLES,
    COLOR_PALETTE,
    DEFAULT_COLOR,
    HEADING_CLASSES,
    NUMBERED_LIST_STYLES,
    TEXT_STYLE_CLASSES,
)


def _color_class(name: Optional[str], slot: int) -> Optional[str]:
    if not name or name == DEFAULT_COLOR:
        return None
    entry = COLOR_PALETTE.get(name)
    return entry[slot] if entry else None


def resolve_style_classes(
    styles: Optional[TextStyles] = None,
    alignment: Optional[str] = None,
    *extra: Optional[str],
) -> list[str]:
    """Resolve styles, alignment and extra classes into an ordered token list.

    Parameters
    ----------
    styles : TextStyles, optional
        Boolean flags and named colors
    alignment : str, optional
        ``left``, ``center``, ``right`` or ``justify``; ``left`` and unknown
        values contribute nothing
    *extra : str or None
        Additional class strings, split on whitespace; falsy values are dropped

    Returns
    -------
    list of str
        Class tokens in resolution order

    Examples
    --------
    >>> resolve_style_classes(TextStyles(bold=True, text_color="red"), "center")
    ['font-bold', 'text-red-600', 'text-center']

    """
    tokens: list[str] = []

    if styles is not None:
        for flag, classes in TEXT_STYLE_CLASSES.items():
            if getattr(styles, flag):
                tokens.extend(classes.split())

        for color_class in (_color_class(styles.text_color, 0), _color_class(styles.background_color, 1)):
            if color_class:
                tokens.append(color_class)

    if alignment:
        alignment_class = ALIGNMENT_CLASSES.get(alignment)
        if alignment_class:
            tokens.append(alignment_class)

    for classes in extra:
        if classes:
            tokens.extend(classes.split())

    return tokens


def class_string(styles: Optional[TextStyles] = None, alignment: Optional[str] = None, *extra: Optional[str]) -> str:
    """Resolve classes and join them with single spaces."""
    return " ".join(resolve_style_classes(styles, alignment, *extra))


def block_classes(props: Optional[BlockProps], *extra: Optional[str]) -> str:
    """Resolve the classes of a block from its props plus extra classes.

    Block-level colors go through the same palette as inline colors. Block
    props carry no boolean flags.

    Parameters
    ----------
    props : BlockProps or None
        Block presentation properties
    *extra : str or None
        Additional class strings appended after the props classes

    Returns
    -------
    str
        Space-joined class string (may be empty)

    """
    if props is None:
        return class_string(None, None, *extra)
    styles = TextStyles(text_color=props.text_color, background_color=props.background_color)
    return class_string(styles, props.text_alignment, *extra)


def heading_classes(level: int) -> str:
    """Return the typographic scale for a heading level (level 3 for unknown levels)."""
    return HEADING_CLASSES.get(level, HEADING_CLASSES[3])


def bullet_list_class(level: int) -> str:
    """Return the bullet marker class for a nesting level, cycling through the styles."""
    return BULLET_LIST_STYLES[level % len(BULLET_LIST_STYLES)]


def numbered_list_class(level: int) -> str:
    """Return the number marker class for a nesting level, cycling through the styles."""
    return NUMBERED_LIST_STYLES[level % len(NUMBERED_LIST_STYLES)]
