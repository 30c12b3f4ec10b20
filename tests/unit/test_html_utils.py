#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_utils.py
"""Unit tests for HTML helper functions."""

import pytest

from blockrender.utils.html_utils import (
    escape_html,
    file_type_color,
    format_bytes,
    get_file_category,
    html_attrs,
    is_safe_url,
    sanitize_iframe_html,
)


@pytest.mark.unit
class TestEscaping:
    """Tests for escape_html and html_attrs."""

    def test_escape(self):
        """Test that markup characters are escaped."""
        assert escape_html('<b>"x" & y</b>') == "&lt;b&gt;&quot;x&quot; &amp; y&lt;/b&gt;"

    def test_escape_disabled(self):
        """Test that escaping can be turned off."""
        assert escape_html("<b>", enabled=False) == "<b>"

    def test_attrs(self):
        """Test None, False, True and empty class handling."""
        assert html_attrs({"id": "h2-2", "class": "", "controls": True, "hidden": False, "title": None}) == (
            ' id="h2-2" controls'
        )

    def test_attr_values_are_escaped(self):
        """Test that attribute values cannot break out of quotes."""
        assert html_attrs({"title": '"><script>'}) == ' title="&quot;&gt;&lt;script&gt;"'


@pytest.mark.unit
class TestSanitizeIframe:
    """Tests for sanitize_iframe_html."""

    def test_keeps_only_iframes(self):
        """Test that other markup is dropped."""
        result = sanitize_iframe_html('<script>alert(1)</script><iframe src="https://v.test/e/1"></iframe><p>x</p>')
        assert result.startswith("<iframe")
        assert "script" not in result
        assert "<p>" not in result

    def test_removes_size_and_handlers(self):
        """Test that size attributes and event handlers are removed."""
        result = sanitize_iframe_html(
            '<iframe src="https://v.test/e/1" width="640" height="360" onload="evil()" '
            'style="width: 640px; border: 1px solid red"></iframe>'
        )
        assert 'width="640"' not in result
        assert "onload" not in result
        assert "width:640px" not in result
        assert "border:1px solid red" in result
        assert "width:100%" in result
        assert "position:absolute" in result

    def test_drops_script_sources(self):
        """Test that javascript: iframes are removed entirely."""
        assert sanitize_iframe_html('<iframe src="javascript:alert(1)"></iframe>') == ""

    @pytest.mark.parametrize(
        "src",
        [
            "data:text/html,<script>alert(1)</script>",
            "vbscript:msgbox(1)",
            " JavaScript:alert(1)",
            "java\tscript:alert(1)",
        ],
    )
    def test_drops_unsafe_schemes(self, src):
        """Test that data:, vbscript: and obfuscated script sources are removed."""
        assert sanitize_iframe_html(f'<iframe src="{src}"></iframe>') == ""

    def test_strips_srcdoc(self):
        """Test that inline srcdoc documents never reach the output."""
        markup = '<iframe src="https://player.example/v" srcdoc="<script>alert(1)</script>"></iframe>'
        result = sanitize_iframe_html(markup)
        assert "srcdoc" not in result
        assert "script" not in result
        assert 'src="https://player.example/v"' in result

    def test_is_safe_url(self):
        """Test scheme checks ignore case and embedded whitespace."""
        assert is_safe_url("https://example.com")
        assert is_safe_url("/relative/path")
        assert not is_safe_url("DATA:image/png;base64,AAAA")
        assert not is_safe_url("\njavascript:alert(1)")

    def test_no_iframe(self):
        """Test that markup without an iframe sanitizes to nothing."""
        assert sanitize_iframe_html("<div>video</div>") == ""


@pytest.mark.unit
class TestFiles:
    """Tests for file size formatting and categories."""

    @pytest.mark.parametrize(
        "size,expected",
        [(0, "0 Bytes"), (500, "500 Bytes"), (1024, "1 KB"), (1536, "1.5 KB"), (1048576, "1 MB"), (5 * 1024**4, "5120 GB")],
    )
    def test_format_bytes(self, size, expected):
        """Test binary unit formatting."""
        assert format_bytes(size) == expected

    @pytest.mark.parametrize("size", [-1, "12", None, True, float("nan")])
    def test_format_bytes_invalid(self, size):
        """Test that invalid sizes format to None."""
        assert format_bytes(size) is None

    def test_categories(self):
        """Test extension categories."""
        assert get_file_category(".PDF") == "document"
        assert get_file_category(".zip") == "archive"
        assert get_file_category(".xyz") == "file"
        assert get_file_category(None) == "file"

    def test_file_type_color_fallback(self):
        """Test that unknown extensions use the default color."""
        assert file_type_color(".unknown") == file_type_color(None)
