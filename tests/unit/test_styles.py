#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_styles.py
"""Unit tests for the style resolver.

Tests cover:
- Token order of flags, colors, alignment and extra classes
- Named color palette and the "default" color
- Block props resolution
- Heading and list marker class tables

"""

import pytest

from blockrender.ast.nodes import BlockProps, TextStyles
from blockrender.styles import (
    block_classes,
    bullet_list_class,
    class_string,
    heading_classes,
    numbered_list_class,
    resolve_style_classes,
)


@pytest.mark.unit
class TestResolveStyleClasses:
    """Tests for resolve_style_classes."""

    def test_no_input_gives_no_classes(self):
        """Test that nothing in means nothing out."""
        assert resolve_style_classes() == []
        assert class_string() == ""

    def test_bold_italic_order(self):
        """Test the documented bold-then-italic order."""
        assert resolve_style_classes(TextStyles(bold=True, italic=True)) == ["font-bold", "italic"]

    def test_flag_order_is_fixed(self):
        """Test that flags resolve in bold, italic, underline, strike, code order."""
        styles = TextStyles(code=True, strike=True, underline=True, italic=True, bold=True)
        tokens = resolve_style_classes(styles)
        assert tokens[:5] == ["font-bold", "italic", "underline", "underline-offset-4", "line-through"]
        assert tokens[5:] == ["font-mono", "bg-gray-100", "dark:bg-gray-800", "px-1", "rounded", "text-sm"]

    def test_multi_token_classes_are_split(self):
        """Test that the underline treatment contributes two tokens."""
        assert resolve_style_classes(TextStyles(underline=True)) == ["underline", "underline-offset-4"]

    def test_colors_follow_flags(self):
        """Test that text then background color follow the flags."""
        styles = TextStyles(bold=True, text_color="red", background_color="blue")
        assert resolve_style_classes(styles) == ["font-bold", "text-red-600", "bg-sky-100"]

    def test_default_color_contributes_nothing(self):
        """Test that the "default" color means no override."""
        assert resolve_style_classes(TextStyles(text_color="default", background_color="default")) == []

    def test_unknown_color_is_ignored(self):
        """Test that colors outside the palette are dropped."""
        assert resolve_style_classes(TextStyles(text_color="chartreuse")) == []

    @pytest.mark.parametrize(
        "alignment,expected",
        [("center", ["text-center"]), ("right", ["text-right"]), ("justify", ["text-justify"]), ("left", [])],
    )
    def test_alignment(self, alignment, expected):
        """Test alignment classes; left is the baseline."""
        assert resolve_style_classes(None, alignment) == expected

    def test_unknown_alignment_is_ignored(self):
        """Test that an unknown alignment contributes nothing."""
        assert resolve_style_classes(None, "diagonal") == []

    def test_extra_classes_are_appended_last(self):
        """Test that extra classes come after alignment and skip falsy values."""
        tokens = resolve_style_classes(TextStyles(italic=True), "center", "mb-4 leading-relaxed", None, "")
        assert tokens == ["italic", "text-center", "mb-4", "leading-relaxed"]


@pytest.mark.unit
class TestBlockClasses:
    """Tests for block-level class resolution."""

    def test_block_props(self):
        """Test that block colors and alignment resolve through the palette."""
        props = BlockProps(text_color="green", background_color="yellow", text_alignment="right")
        assert block_classes(props, "extra") == "text-teal-700 bg-yellow-100 text-right extra"

    def test_missing_props(self):
        """Test that None props only yield the extra classes."""
        assert block_classes(None, "a b") == "a b"

    def test_empty_props(self):
        """Test that empty props and no extras give an empty string."""
        assert block_classes(BlockProps()) == ""


@pytest.mark.unit
class TestClassTables:
    """Tests for heading and list class tables."""

    def test_heading_levels_differ(self):
        """Test that each level has its own scale."""
        assert len({heading_classes(level) for level in range(1, 7)}) == 6
        assert heading_classes(1).startswith("font-extrabold")

    def test_unknown_heading_level_uses_level_three(self):
        """Test the fallback scale."""
        assert heading_classes(42) == heading_classes(3)

    def test_bullet_markers_cycle(self):
        """Test that bullet marker classes cycle every four levels."""
        assert [bullet_list_class(level) for level in range(5)] == [
            "list-disc",
            "list-[circle]",
            "list-[square]",
            "list-dash",
            "list-disc",
        ]

    def test_numbered_markers_cycle(self):
        """Test that number marker classes cycle every four levels."""
        assert numbered_list_class(0) == "list-decimal"
        assert numbered_list_class(2) == "list-[lower-alpha]"
        assert numbered_list_class(4) == "list-decimal"
