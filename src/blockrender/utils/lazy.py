#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/utils/lazy.py
"""Write-once, thread-safe handles for heavy optional modules.

A :class:`LazyModule` imports its module the first time :meth:`LazyModule.get`
is called. The first caller creates a shared future and performs the import;
callers arriving while the import is in flight wait on that same future
rather than importing again. Once loaded, the module is returned directly.

A failed import is not cached: the handle resets, so a later call (for
example after the package was installed) tries again.
"""

from __future__ import annotations

import importlib
import logging
import threading
from concurrent.futures import Future
from types import ModuleType
from typing import Optional

from blockrender.utils.decorators import check_dependencies

logger = logging.getLogger(__name__)


class LazyModule:
    """Lazily imported module shared by every caller in the process.

    Parameters
    ----------
    import_name : str
        Module to import, e.g. ``"pygments"``
    install_name : str, optional
        Distribution name used in install hints (defaults to ``import_name``)
    version_spec : str, default ""
        Version requirement checked before the import
    feature_name : str, optional
        Feature named in DependencyError messages

    Examples
    --------
        >>> pygments = LazyModule("pygments", "Pygments", ">=2.15", feature_name="syntax highlighting")
        >>> pygments.get().__name__
        'pygments'

    """

    def __init__(
        self,
        import_name: str,
        install_name: Optional[str] = None,
        version_spec: str = "",
        feature_name: Optional[str] = None,
    ):
        self.import_name = import_name
        self.install_name = install_name or import_name
        self.version_spec = version_spec
        self.feature_name = feature_name or import_name
        self._lock = threading.Lock()
        self._future: Optional[Future[ModuleType]] = None
        self._module: Optional[ModuleType] = None

    @property
    def is_loaded(self) -> bool:
        """Whether the module has been imported successfully."""
        return self._module is not None

    def get(self) -> ModuleType:
        """Return the module, importing it on first use.

        Returns
        -------
        ModuleType
            The imported module

        Raises
        ------
        DependencyError
            If the package is missing or its version does not match

        """
        module = self._module
        if module is not None:
            return module

        with self._lock:
            if self._module is not None:
                return self._module
            future = self._future
            is_owner = future is None
            if future is None:
                future = Future()
                self._future = future

        if not is_owner:
            return future.result()

        try:
            check_dependencies(self.feature_name, [(self.install_name, self.import_name, self.version_spec)])
            # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
            module = importlib.import_module(self.import_name)
        except Exception as e:
            with self._lock:
                self._future = None
            future.set_exception(e)
            raise

        logger.debug("Loaded optional module %s", self.import_name)
        with self._lock:
            self._module = module
        future.set_result(module)
        return module

    def reset(self) -> None:
        """Forget the loaded module so the next ``get`` imports again."""
        with self._lock:
            self._module = None
            self._future = None
