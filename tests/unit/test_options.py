#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for renderer options."""

import dataclasses

import pytest

from blockrender.exceptions import InvalidOptionsError
from blockrender.options import BaseRendererOptions, HtmlRendererOptions, create_updated_options
from blockrender.renderers.html import HtmlRenderer


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Tests for HtmlRendererOptions validation and cloning."""

    def test_defaults(self):
        """Test the default option values."""
        options = HtmlRendererOptions()
        assert options.locale == "en"
        assert options.color_scheme == "light"
        assert options.start_heading_index == 2
        assert options.file_url_prefix == "/files"
        assert not options.standalone

    def test_frozen(self):
        """Test that options cannot be mutated."""
        options = HtmlRendererOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.standalone = True  # type: ignore[misc]

    def test_create_updated(self):
        """Test that create_updated returns a modified copy."""
        options = HtmlRendererOptions()
        updated = options.create_updated(color_scheme="dark", include_toc=True)
        assert updated.color_scheme == "dark"
        assert updated.include_toc
        assert options.color_scheme == "light"
        assert create_updated_options(options, locale="zh").locale == "zh"

    def test_code_theme_follows_scheme(self):
        """Test light and dark code themes."""
        assert HtmlRendererOptions().code_theme == "solarized-light"
        assert HtmlRendererOptions(color_scheme="dark").code_theme == "dracula"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"color_scheme": "sepia"},
            {"start_heading_index": -1},
            {"locale": ""},
            {"code_theme_dark": ""},
            {"css_class_map": {"Paragraph": 3}},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test that invalid values raise ValueError."""
        with pytest.raises(ValueError):
            HtmlRendererOptions(**kwargs)

    def test_css_class_map_accepts_lists(self):
        """Test that class lists are valid."""
        assert HtmlRendererOptions(css_class_map={"Table": ["a", "b"]}).css_class_map == {"Table": ["a", "b"]}


@pytest.mark.unit
class TestRendererOptionsType:
    """Tests for renderer options type checking."""

    def test_wrong_options_class(self):
        """Test that a foreign options class is rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(BaseRendererOptions())  # type: ignore[arg-type]

    def test_none_uses_defaults(self):
        """Test that None gives default options."""
        assert HtmlRenderer(None).options == HtmlRendererOptions()
