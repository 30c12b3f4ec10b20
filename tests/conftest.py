"""Pytest configuration and shared fixtures for the blockrender test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite. Block builders live in ``utils``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from blockrender.options import HtmlRendererOptions
from blockrender.renderers.html import HtmlRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - complete documents and the CLI")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def renderer() -> HtmlRenderer:
    """Provide a fragment renderer without Pygments highlighting.

    Returns
    -------
    HtmlRenderer
        Renderer with default options except ``syntax_highlighting=False``.

    """
    return HtmlRenderer(HtmlRendererOptions(syntax_highlighting=False))


@pytest.fixture
def render(renderer):
    """Provide a function rendering a block list to a string."""

    def _render(blocks):
        return renderer.render_to_string(blocks)

    return _render
