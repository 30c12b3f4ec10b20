#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_table_layout.py
"""Unit tests for the table layout engine.

Tests cover:
- Column sizing modes (unsized, mixed, percent)
- Percentage rounding with the residual on the last column
- Cell planning: tags, spans, alignment and placeholders

"""

from decimal import Decimal

import pytest
from utils import text

from blockrender.ast.nodes import BlockProps, TableCell
from blockrender.table_layout import ColumnSpec, compute_column_layout, percent_widths, plan_cell


@pytest.mark.unit
class TestColumnLayout:
    """Tests for compute_column_layout."""

    def test_no_widths_is_unsized(self):
        """Test that an all-None width list leaves columns unsized."""
        layout = compute_column_layout([None, None])
        assert layout.mode == "unsized"
        assert not layout.has_colgroup
        assert [column.style for column in layout.columns] == [None, None]

    def test_empty_width_list_is_unsized(self):
        """Test that a table without widths has no colgroup."""
        layout = compute_column_layout([])
        assert layout.mode == "unsized"
        assert layout.columns == ()

    def test_mixed_widths(self):
        """Test [100, 200, None] keeps pixel widths and an unstyled column."""
        layout = compute_column_layout([100, 200, None])
        assert layout.mode == "mixed"
        assert layout.has_colgroup
        assert [column.style for column in layout.columns] == ["100px", "200px", None]

    def test_equal_widths_sum_to_hundred(self):
        """Test [1, 1, 1] gives 33.33, 33.33, 33.34."""
        layout = compute_column_layout([1, 1, 1])
        assert layout.mode == "percent"
        assert [column.style for column in layout.columns] == ["33.33%", "33.33%", "33.34%"]

    def test_two_columns(self):
        """Test that even splits render without trailing zeros."""
        layout = compute_column_layout([150, 150])
        assert [column.style for column in layout.columns] == ["50%", "50%"]

    def test_non_positive_total_is_unsized(self):
        """Test that widths summing to zero leave the table unsized."""
        assert compute_column_layout([0, 0]).mode == "unsized"

    def test_exact_zero_decimal_total_is_unsized(self):
        """Test that widths whose decimal sum is exactly zero stay unsized."""
        layout = compute_column_layout([0.1, 0.2, -0.3])
        assert layout.mode == "unsized"
        assert not layout.has_colgroup

    def test_fractional_pixel_widths(self):
        """Test that fractional pixel widths keep their precision."""
        layout = compute_column_layout([120.5, None])
        assert layout.columns[0].style == "120.5px"


@pytest.mark.unit
class TestPercentWidths:
    """Tests for percent_widths."""

    def test_half_up_rounding(self):
        """Test that 1/8 = 12.5 stays exact and residual lands last."""
        assert percent_widths([1, 7]) == [Decimal("12.50"), Decimal("87.50")]

    def test_residual_on_last_column(self):
        """Test that the last column absorbs the rounding difference."""
        widths = percent_widths([1, 1, 1, 1, 1, 1])
        assert widths[:5] == [Decimal("16.67")] * 5
        assert widths[5] == Decimal("16.65")
        assert sum(widths) == Decimal("100.00")

    def test_single_column(self):
        """Test that one column takes everything."""
        assert percent_widths([300]) == [Decimal("100.00")]

    @pytest.mark.parametrize("widths", [[0, 0], [0.1, 0.2, -0.3], [1, -2], []])
    def test_non_positive_total_raises(self, widths):
        """Test that a non-positive decimal total is rejected."""
        with pytest.raises(ValueError, match="positive total"):
            percent_widths(widths)

    def test_column_spec_style(self):
        """Test the CSS rendering of a column spec."""
        assert ColumnSpec(Decimal("33.30"), "%").style == "33.3%"
        assert ColumnSpec().style is None


@pytest.mark.unit
class TestPlanCell:
    """Tests for plan_cell."""

    def test_header_cell(self):
        """Test that header cells are th elements with header classes."""
        plan = plan_cell(TableCell(content=[text("Name")]), is_header=True)
        assert plan.tag == "th"
        assert "font-semibold" in plan.classes.split()
        assert plan.colspan is None and plan.rowspan is None

    def test_body_cell(self):
        """Test that body cells are td elements."""
        plan = plan_cell(TableCell(content=[text("x")]), is_header=False)
        assert plan.tag == "td"
        assert "text-gray-700" in plan.classes.split()

    def test_spans_only_above_one(self):
        """Test that spans are reported only when greater than one."""
        plan = plan_cell(TableCell(content=[text("x")], colspan=2, rowspan=1), is_header=False)
        assert plan.colspan == 2
        assert plan.rowspan is None

    def test_spanning_cell_alignment_is_centred(self):
        """Test that a spanning aligned cell is centred."""
        cell = TableCell(content=[text("x")], colspan=3, props=BlockProps(text_alignment="right"))
        plan = plan_cell(cell, is_header=True)
        assert plan.alignment == "center"
        assert "text-center" in plan.classes.split()
        assert "text-right" not in plan.classes.split()

    def test_non_spanning_alignment_kept(self):
        """Test that a regular cell keeps its own alignment."""
        cell = TableCell(content=[text("x")], props=BlockProps(text_alignment="right"))
        assert plan_cell(cell, is_header=False).alignment == "right"

    def test_spanning_without_alignment_stays_unaligned(self):
        """Test that span adjustment only applies to aligned cells."""
        assert plan_cell(TableCell(content=[text("x")], rowspan=2), is_header=False).alignment is None

    def test_empty_cell(self):
        """Test that a cell without content is flagged for the placeholder."""
        assert plan_cell(TableCell(), is_header=False).is_empty

    def test_cell_colors(self):
        """Test that cell colors resolve through the palette."""
        cell = TableCell(content=[text("x")], props=BlockProps(background_color="red"))
        assert "bg-red-100" in plan_cell(cell, is_header=False).classes.split()
