#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for blockrender.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML, and turning a loaded configuration into
:class:`~blockrender.options.HtmlRendererOptions`.

A configuration is a flat table whose keys are option field names, for
example::

    # .blockrender.toml
    locale = "zh"
    color_scheme = "dark"
    include_toc = true

    [css_class_map]
    Paragraph = "prose-p"

"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from blockrender.exceptions import ConfigError
from blockrender.options.html import HtmlRendererOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BLOCKRENDER_CONFIG"
DEDICATED_CONFIG_FILENAMES = [".blockrender.toml", ".blockrender.yaml", ".blockrender.yml", ".blockrender.json"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.blockrender] section of a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get("blockrender")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.blockrender] section in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root. In each directory
    the dedicated files are checked first (``.blockrender.toml``,
    ``.blockrender.yaml``, ``.blockrender.yml``, ``.blockrender.json``), then
    a ``pyproject.toml`` with a ``[tool.blockrender]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the file does not exist, cannot be parsed, or has an unsupported
        extension

    Examples
    --------
    >>> config = load_config_file(".blockrender.toml")  # doctest: +SKIP
    >>> config.get("color_scheme")  # doctest: +SKIP
    'dark'

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a mapping at the top level, got {type(config).__name__}", str(config_path)
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. ``BLOCKRENDER_CONFIG`` environment variable
    3. Auto-discovered file (see :func:`find_config_in_parents`)

    Returns an empty dict when nothing is found.
    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered = find_config_in_parents()
    if discovered:
        logger.debug(f"Using configuration from {discovered}")
        return load_config_file(discovered)
    return {}


def options_from_config(
    config: Dict[str, Any], base: Optional[HtmlRendererOptions] = None
) -> HtmlRendererOptions:
    """Build renderer options from a configuration mapping.

    Keys are option field names; dashes are accepted in place of
    underscores. Unknown keys and collaborator fields are ignored with a
    warning.

    Parameters
    ----------
    config : dict
        Loaded configuration
    base : HtmlRendererOptions, optional
        Options to start from; defaults are used when omitted

    Returns
    -------
    HtmlRendererOptions
        Options with the configured values applied

    Raises
    ------
    ConfigError
        If a configured value fails option validation

    """
    base = base or HtmlRendererOptions()
    allowed = {f.name for f in fields(HtmlRendererOptions) if not f.metadata.get("exclude_from_cli")}

    updates: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        if name not in allowed:
            logger.warning(f"Ignoring unknown configuration key: {key}")
            continue
        updates[name] = value

    try:
        return base.create_updated(**updates)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}", original_error=e) from e


__all__ = [
    "CONFIG_ENV_VAR",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "options_from_config",
]
