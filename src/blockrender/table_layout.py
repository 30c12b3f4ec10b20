#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Table layout: column sizing and cell planning.

Column widths come from the editor as pixel values, with ``None`` for columns
the user never resized. Three sizing modes follow from that list:

``unsized``
    No width specified anywhere; the browser distributes the columns.
``mixed``
    Some widths specified; those columns get fixed pixel widths and the rest
    are left unstyled.
``percent``
    Every width specified; widths are converted to percentages of their
    total so the table scales with its container.

Percentages are computed with :class:`decimal.Decimal`: each share is rounded
half-up to two decimals and the rounding residual is added to the last
column, so the emitted percentages always sum to exactly 100.00.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from blockrender.ast.nodes import BlockProps, TableCell
from blockrender.constants import (
    TABLE_BODY_CELL_CLASSES,
    TABLE_CELL_BASE_CLASSES,
    TABLE_HEADER_CELL_CLASSES,
    ColumnSizingMode,
    ColumnUnit,
)
from blockrender.styles import block_classes

logger = logging.getLogger(__name__)

_HUNDRED = Decimal(100)
_CENT = Decimal("0.01")


def _format_decimal(value: Decimal) -> str:
    # 50.00 -> "50", 33.30 -> "33.3", 120.5 -> "120.5"
    return format(value.normalize(), "f")


@dataclass(frozen=True)
class ColumnSpec:
    """Width of one column.

    Parameters
    ----------
    width : Decimal or None
        Width value, or None for an unstyled column
    unit : {"px", "%"} or None
        Unit of ``width``

    """

    width: Optional[Decimal] = None
    unit: Optional[ColumnUnit] = None

    @property
    def style(self) -> Optional[str]:
        """CSS width value such as ``"120px"`` or ``"33.33%"``, or None."""
        if self.width is None or self.unit is None:
            return None
        return f"{_format_decimal(self.width)}{self.unit}"


@dataclass(frozen=True)
class ColumnLayout:
    """Sizing mode and per-column widths of a table."""

    mode: ColumnSizingMode
    columns: tuple[ColumnSpec, ...]

    @property
    def has_colgroup(self) -> bool:
        """Whether a ``<colgroup>`` should be emitted (some width was specified)."""
        return self.mode != "unsized"


def percent_widths(widths: list[float]) -> list[Decimal]:
    """Convert positive widths into two-decimal percentages summing to 100.

    Parameters
    ----------
    widths : list of float
        Column widths; their exact decimal sum must be positive

    Returns
    -------
    list of Decimal
        Percentages quantized to 0.01, residual applied to the last entry

    Raises
    ------
    ValueError
        If the widths do not sum to a positive finite total

    Examples
    --------
    >>> [str(p) for p in percent_widths([1, 1, 1])]
    ['33.33', '33.33', '33.34']

    """
    values = [Decimal(str(width)) for width in widths]
    total = sum(values, Decimal(0))
    if not total.is_finite() or total <= 0:
        raise ValueError(f"Column widths must sum to a positive total, got {total}")
    rounded = [(value / total * _HUNDRED).quantize(_CENT, rounding=ROUND_HALF_UP) for value in values]
    if rounded:
        residual = _HUNDRED - sum(rounded, Decimal(0))
        rounded[-1] = (rounded[-1] + residual).quantize(_CENT, rounding=ROUND_HALF_UP)
    return rounded


def compute_column_layout(column_widths: list[Optional[float]]) -> ColumnLayout:
    """Decide how the columns of a table are sized.

    Parameters
    ----------
    column_widths : list of float or None
        Width per column; None marks an unsized column

    Returns
    -------
    ColumnLayout
        Sizing mode and one ColumnSpec per input column

    """
    if not any(width is not None for width in column_widths):
        return ColumnLayout(mode="unsized", columns=tuple(ColumnSpec() for _ in column_widths))

    if any(width is None for width in column_widths):
        return ColumnLayout(
            mode="mixed",
            columns=tuple(
                ColumnSpec(Decimal(str(width)), "px") if width is not None else ColumnSpec() for width in column_widths
            ),
        )

    specified = [float(width) for width in column_widths if width is not None]
    # The sign test uses the same exact decimal total as the division
    total = sum((Decimal(str(width)) for width in specified), Decimal(0))
    if not total.is_finite() or total <= 0:
        logger.debug("Column widths sum to %s; leaving columns unsized", total)
        return ColumnLayout(mode="unsized", columns=tuple(ColumnSpec() for _ in column_widths))

    return ColumnLayout(
        mode="percent",
        columns=tuple(ColumnSpec(percent, "%") for percent in percent_widths(specified)),
    )


@dataclass(frozen=True)
class CellPlan:
    """How a single cell is rendered.

    Parameters
    ----------
    tag : {"th", "td"}
        Element name
    colspan, rowspan : int or None
        Span attributes; None when the span is 1 and the attribute is omitted
    alignment : str or None
        Effective alignment after span adjustment
    classes : str
        Resolved class string
    is_empty : bool
        True when the cell has no content and gets a placeholder

    """

    tag: str
    colspan: Optional[int]
    rowspan: Optional[int]
    alignment: Optional[str]
    classes: str
    is_empty: bool


def plan_cell(cell: TableCell, is_header: bool) -> CellPlan:
    """Work out tag, spans, alignment and classes for one cell.

    A spanning cell that has an alignment is centred: spanning headers read
    as group labels over the columns they cover.

    Parameters
    ----------
    cell : TableCell
        Cell to plan
    is_header : bool
        Whether the cell belongs to the header (first) row

    Returns
    -------
    CellPlan
        Rendering plan for the cell

    """
    alignment = cell.props.text_alignment
    if cell.is_spanning and alignment:
        alignment = "center"

    props = BlockProps(
        text_color=cell.props.text_color,
        background_color=cell.props.background_color,
        text_alignment=alignment,
    )
    classes = block_classes(
        props,
        TABLE_CELL_BASE_CLASSES,
        TABLE_HEADER_CELL_CLASSES if is_header else TABLE_BODY_CELL_CLASSES,
    )
    return CellPlan(
        tag="th" if is_header else "td",
        colspan=cell.colspan if cell.colspan > 1 else None,
        rowspan=cell.rowspan if cell.rowspan > 1 else None,
        alignment=alignment,
        classes=classes,
        is_empty=not cell.content,
    )
