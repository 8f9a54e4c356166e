#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for html2tbl.

Options can be kept in a dedicated file (``.html2tbl.toml``,
``.html2tbl.yaml``/``.yml``, ``.html2tbl.json``) or in the ``[tool.html2tbl]``
table of ``pyproject.toml``. Keys are the :class:`~html2tbl.options.TableOptions`
field names; dashes may be used in place of underscores::

    [tool.html2tbl]
    column-separator = "|"
    expand-marker = ""

"""

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from html2tbl.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from html2tbl.exceptions import ConfigError
from html2tbl.options import TableOptions

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.html2tbl] table from pyproject.toml, or {} when absent."""
    data = _load_toml_config(pyproject_path)
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(
            f"[tool] in {pyproject_path} must be a table, got {type(tool).__name__}",
            config_path=str(pyproject_path),
        )
    config = tool.get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration mapping from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Raw configuration mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of an unknown type

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    ext = config_path.suffix.lower()
    try:
        if config_path.name.lower() == "pyproject.toml":
            return _load_pyproject_section(config_path)
        elif ext == ".toml":
            return _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            return _load_yaml_config(config_path)
        elif ext == ".json":
            return _load_json_config(config_path)
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    raise ConfigError(
        f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", config_path=str(config_path)
    )


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file from ``start_dir`` up to the filesystem root.

    In each directory the dedicated files are checked first, then a
    ``pyproject.toml`` that has a ``[tool.html2tbl]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                logger.debug("Ignoring unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def options_from_dict(config: Mapping[str, Any], base: Optional[TableOptions] = None) -> TableOptions:
    """Build TableOptions from a configuration mapping.

    Parameters
    ----------
    config : Mapping
        Option names (underscores or dashes) to values
    base : TableOptions, optional
        Options to update; defaults are used when omitted

    Returns
    -------
    TableOptions
        The resulting options

    Raises
    ------
    ConfigError
        If a key is unknown or a value is rejected by option validation

    """
    known = {f.name for f in fields(TableOptions)}
    updates: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        if name not in known:
            raise ConfigError(f"Unknown option '{key}'. Valid options: {', '.join(sorted(known))}")
        updates[name] = value

    try:
        return (base or TableOptions()).create_updated(**updates)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}", original_error=e) from e


def load_options(config_path: Path | str | None = None) -> TableOptions:
    """Load TableOptions from a file, or from the nearest discovered configuration.

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit configuration file. When omitted, the working directory and
        its parents are searched; defaults are returned when nothing is found.

    Returns
    -------
    TableOptions
        Loaded options

    Raises
    ------
    ConfigError
        If the configuration cannot be read or applied

    """
    path = Path(config_path) if config_path is not None else find_config_in_parents()
    if path is None:
        return TableOptions()

    logger.debug("Loading options from %s", path)
    try:
        return options_from_dict(load_config_file(path))
    except ConfigError as e:
        if e.config_path is None:
            e.config_path = str(path)
        raise


__all__ = ["load_config_file", "find_config_in_parents", "options_from_dict", "load_options"]
