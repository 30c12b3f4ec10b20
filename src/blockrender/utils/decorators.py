#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/utils/decorators.py
"""Utility decorators for blockrender collaborators.

Optional third-party packages (Pygments for highlighting, BeautifulSoup for
embed sanitizing) are checked here once, so callers get a single
:class:`~blockrender.exceptions.DependencyError` that names every missing
package and the pip command that installs them.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from importlib import metadata
from typing import Any, Callable, Generator, List, Optional, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from blockrender.exceptions import DependencyError

logger = logging.getLogger(__name__)


def _installed_version_matches(install_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Return whether the installed distribution satisfies ``version_spec``, plus its version."""
    try:
        installed = metadata.version(install_name)
    except metadata.PackageNotFoundError:
        # Importable but unregistered, e.g. a vendored module; nothing to compare against
        return False, None
    try:
        return SpecifierSet(version_spec).contains(Version(installed), prereleases=True), installed
    except (InvalidSpecifier, InvalidVersion):
        logger.debug("Cannot compare %s %s against %r", install_name, installed, version_spec)
        return False, installed


def check_dependencies(feature_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise DependencyError unless every package imports at a matching version.

    Parameters
    ----------
    feature_name : str
        Feature that needs the packages; appears in the error message
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` tuples

    Raises
    ------
    DependencyError
        If any package is missing or has an incompatible version

    """
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        try:
            # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e
            continue

        if version_spec:
            meets_requirement, installed_version = _installed_version_matches(install_name, version_spec)
            if not meets_requirement:
                version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

    if missing or version_mismatches:
        raise DependencyError(
            feature_name=feature_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(feature_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before function execution.

    Parameters
    ----------
    feature_name : str
        Name of the feature (e.g., "highlight"). This appears in error
        messages to help users identify which feature needs dependencies.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.12" or "" for any version)

    Returns
    -------
    Callable
        Decorated function that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("video embeds", [("beautifulsoup4", "bs4", ">=4.12")])
        ... def sanitize(markup):
        ...     from bs4 import BeautifulSoup
        ...     # sanitizing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check_dependencies(feature_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block of code and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering")

    Yields
    ------
    None
        Control flow to the code block being timed

    Notes
    -----
    Only measures time when the logger has DEBUG level enabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
