#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_decorators.py
"""Unit tests for the optional dependency checks."""

from importlib import metadata
from unittest.mock import patch

import pytest

from blockrender.exceptions import DependencyError
from blockrender.utils.decorators import check_dependencies, requires_dependencies

VERSION_LOOKUP = "blockrender.utils.decorators.metadata.version"


@pytest.mark.unit
class TestCheckDependencies:
    """Tests for import and version checks."""

    def test_satisfied(self):
        """Test that an importable package at a matching version passes."""
        with patch(VERSION_LOOKUP, return_value="4.12.3"):
            check_dependencies("video embeds", [("beautifulsoup4", "json", ">=4.12")])

    def test_any_version_skips_metadata(self):
        """Test that an empty version spec only checks the import."""
        with patch(VERSION_LOOKUP) as lookup:
            check_dependencies("feature", [("json", "json", "")])
        lookup.assert_not_called()

    def test_missing_package(self):
        """Test that a failed import is reported with its install name."""
        with pytest.raises(DependencyError) as excinfo:
            check_dependencies("highlight", [("no-such-dist", "no_such_module_xyz", ">=1.0")])
        assert excinfo.value.missing_packages == [("no-such-dist", ">=1.0")]
        assert isinstance(excinfo.value.original_import_error, ImportError)
        assert 'pip install --upgrade "no-such-dist>=1.0"' in str(excinfo.value)

    def test_version_too_old(self):
        """Test that an installed version below the requirement is a mismatch."""
        with patch(VERSION_LOOKUP, return_value="4.9.0"):
            with pytest.raises(DependencyError) as excinfo:
                check_dependencies("video embeds", [("beautifulsoup4", "json", ">=4.12")])
        assert excinfo.value.version_mismatches == [("beautifulsoup4", ">=4.12", "4.9.0")]

    def test_prerelease_counts_as_installed_version(self):
        """Test that a pre-release above the floor satisfies the requirement."""
        with patch(VERSION_LOOKUP, return_value="2.16.0rc1"):
            check_dependencies("highlight", [("Pygments", "json", ">=2.15")])

    def test_unregistered_distribution(self):
        """Test that a module without distribution metadata reports an unknown version."""
        with patch(VERSION_LOOKUP, side_effect=metadata.PackageNotFoundError("x")):
            with pytest.raises(DependencyError) as excinfo:
                check_dependencies("highlight", [("Pygments", "json", ">=2.15")])
        assert excinfo.value.version_mismatches == [("Pygments", ">=2.15", "unknown")]

    def test_unparseable_installed_version(self):
        """Test that a non-PEP 440 installed version is a mismatch, not a crash."""
        with patch(VERSION_LOOKUP, return_value="not-a-version"):
            with pytest.raises(DependencyError) as excinfo:
                check_dependencies("highlight", [("Pygments", "json", ">=2.15")])
        assert excinfo.value.version_mismatches == [("Pygments", ">=2.15", "not-a-version")]


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the decorator form."""

    def test_checks_before_call(self):
        """Test that the wrapped function never runs when a package is missing."""
        calls = []

        @requires_dependencies("feature", [("no-such-dist", "no_such_module_xyz", "")])
        def work():
            calls.append(1)

        with pytest.raises(DependencyError):
            work()
        assert calls == []

    def test_passes_through(self):
        """Test that arguments and the return value pass through unchanged."""

        @requires_dependencies("feature", [("json", "json", "")])
        def add(a, b=0):
            return a + b

        assert add(1, b=2) == 3
        assert add.__name__ == "add"
