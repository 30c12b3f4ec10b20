#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_html_document.py
"""Unit tests for document-level HtmlRenderer behaviour.

Tests cover:
- Standalone documents and the dark class
- Table of contents generation
- Custom classes from ``css_class_map``
- Writing output to paths and streams
- Option type validation

"""

from io import BytesIO, StringIO

import pytest
from utils import bullet, heading, link, paragraph

from blockrender.anchors import extract_toc
from blockrender.ast.nodes import Heading
from blockrender.exceptions import InvalidOptionsError, OutputWriteError
from blockrender.options import HtmlRendererOptions
from blockrender.options.base import BaseRendererOptions
from blockrender.renderers.html import HtmlRenderer


def _renderer(**kwargs) -> HtmlRenderer:
    return HtmlRenderer(HtmlRendererOptions(syntax_highlighting=False, **kwargs))


@pytest.mark.unit
class TestStandalone:
    """Tests for complete HTML documents."""

    def test_standalone_document(self):
        """Content is wrapped in a full page."""
        result = _renderer(standalone=True, title="Notes").render_to_string([paragraph("p", "Hi")])
        assert result == "\n".join(
            [
                "<!DOCTYPE html>",
                '<html lang="en">',
                "<head>",
                '<meta charset="UTF-8">',
                '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
                "<title>Notes</title>",
                "</head>",
                "<body>",
                "<main>",
                '<section><p class="mb-4 leading-relaxed">Hi</p></section>\n',
                "</main>",
                "</body>",
                "</html>",
            ]
        )

    def test_default_title_and_escaping(self):
        """A missing title uses the default; titles are escaped."""
        assert "<title>Document</title>" in _renderer(standalone=True).render_to_string([])
        assert "<title>a &amp; b</title>" in _renderer(standalone=True, title="a & b").render_to_string([])

    def test_dark_scheme_marks_html(self):
        """Dark pages carry the dark class on the root element."""
        result = _renderer(standalone=True, color_scheme="dark", locale="zh").render_to_string([])
        assert '<html lang="zh" class="dark">' in result

    def test_fragment_has_no_page_chrome(self, render):
        """Fragments are content only."""
        assert "<html" not in render([paragraph("p")])


@pytest.mark.unit
class TestTableOfContents:
    """Tests for the generated table of contents."""

    def test_toc_prepended_to_fragment(self):
        """The nav lists each rendered heading with its anchor."""
        blocks = [heading("a", level=2, value="Intro"), heading("b", level=3, value="Details")]
        result = _renderer(include_toc=True).render_to_string(blocks)
        assert result.startswith(
            "\n".join(
                [
                    '<nav id="table-of-contents" aria-label="Table of contents">',
                    "<h2>Table of contents</h2>",
                    "<ul>",
                    '<li class="toc-level-2"><a href="#h2-2">Intro</a></li>',
                    '<li class="toc-level-3"><a href="#h3-3">Details</a></li>',
                    "</ul>",
                    "</nav>\n",
                ]
            )
        )
        assert '<h2 id="h2-2"' in result
        assert '<h3 id="h3-3"' in result

    def test_no_headings_no_toc(self):
        """Without headings there is no nav."""
        assert "<nav" not in _renderer(include_toc=True).render_to_string([paragraph("p")])

    def test_toc_inside_standalone_body(self):
        """Standalone pages put the nav before main."""
        result = _renderer(standalone=True, include_toc=True).render_to_string([heading("a")])
        assert result.index('<nav id="table-of-contents"') < result.index("<main>")

    def test_toc_uses_link_text(self):
        """Entry text includes link labels."""
        block = Heading(id="a", level=2, content=[link("https://x.test", "Linked"), *heading("x").content])
        renderer = _renderer(include_toc=True)
        renderer.render_to_string([block])
        assert renderer.toc[0].text == "LinkedTitle"

    def test_toc_property_matches_extract_toc(self, renderer):
        """The collected entries match the standalone TOC extraction."""
        blocks = [
            heading("a", level=1, children=[heading("b", level=4)]),
            heading("skipped", value=""),
            bullet("l", children=[heading("c", level=2)]),
        ]
        renderer.render_to_string(blocks)
        assert renderer.toc == extract_toc(blocks)
        assert [item.id for item in renderer.toc] == ["h1-2", "h4-3", "h2-5"]

    def test_localized_toc_label(self):
        """The nav label is translated."""
        result = _renderer(include_toc=True, locale="zh").render_to_string([heading("a")])
        assert "<h2>目录</h2>" in result


@pytest.mark.unit
class TestCustomClasses:
    """Tests for ``css_class_map``."""

    def test_classes_appended_per_block_type(self):
        """Mapped classes follow the built-in ones."""
        renderer = _renderer(css_class_map={"Paragraph": "prose-p", "Heading": ["h-a", "h-b"]})
        result = renderer.render_to_string([paragraph("p"), heading("h")])
        assert '<p class="mb-4 leading-relaxed prose-p">' in result
        assert result.split('id="h2-2" class="')[1].split('"')[0].endswith("h-a h-b")

    def test_group_classes(self):
        """List containers are keyed by their group type."""
        result = _renderer(css_class_map={"BulletGroup": "tight"}).render_to_string([bullet("a")])
        assert '<ul class="mb-4 space-y-2 pl-6 list-disc tight"' in result


@pytest.mark.unit
class TestOutput:
    """Tests for writing rendered output."""

    def test_render_to_path(self, renderer, tmp_path):
        """Paths are written as UTF-8."""
        target = tmp_path / "out.html"
        renderer.render([paragraph("p", "héllo")], target)
        assert target.read_text(encoding="utf-8") == '<section><p class="mb-4 leading-relaxed">héllo</p></section>\n'

    def test_render_to_streams(self, renderer):
        """Text and binary streams are both accepted."""
        text_stream = StringIO()
        binary_stream = BytesIO()
        renderer.render([paragraph("p", "x")], text_stream)
        renderer.render([paragraph("p", "x")], binary_stream)
        assert binary_stream.getvalue().decode("utf-8") == text_stream.getvalue()

    def test_unwritable_path(self, renderer, tmp_path):
        """Write failures raise OutputWriteError."""
        with pytest.raises(OutputWriteError):
            renderer.render([paragraph("p")], tmp_path / "missing" / "out.html")


@pytest.mark.unit
class TestOptionValidation:
    """Tests for renderer construction."""

    def test_wrong_options_type(self):
        """Options of another type are rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(BaseRendererOptions())  # type: ignore[arg-type]
