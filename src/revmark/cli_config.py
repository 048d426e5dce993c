#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the revmark CLI.

Options can be stored in ``.revmark.toml``, ``.revmark.yaml``/``.yml``,
``.revmark.json`` or the ``[tool.revmark]`` table of ``pyproject.toml``. Keys
are :class:`~revmark.options.ConverterOptions` field names; hyphens are
accepted in place of underscores. Two keys receive special handling:

``escape_rules``
    A list of ``[pattern, replacement]`` pairs replacing the default rules.
``language_mappings``
    A table mapping class-attribute languages to fence languages, used to
    build a :class:`~revmark.language_mapper.CodeBlockLanguageMapper`.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from revmark.language_mapper import CodeBlockLanguageMapper
from revmark.options import ConverterOptions
from revmark.utils.escape import EscapeRule

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".revmark.toml", ".revmark.yaml", ".revmark.yml", ".revmark.json"]


def _load_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _load_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


_LOADERS: Dict[str, Callable[[Path], Any]] = {
    ".toml": _load_toml,
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".json": _load_json,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.revmark]`` table of a pyproject file, or an empty dict."""
    section = _load_toml(pyproject_path).get("tool", {}).get("revmark", {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.revmark] section in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file from ``start_dir`` up to the filesystem root.

    In each directory the dedicated config files are checked first, then a
    ``pyproject.toml`` containing a ``[tool.revmark]`` table.

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
            candidate = current / filename
            if candidate.is_file():
                return candidate

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError, OSError):
                logger.debug("Skipping unreadable %s", pyproject_path)

        if current.parent == current:
            return None
        current = current.parent


def discover_config_file() -> Optional[Path]:
    """Return the nearest config file, falling back to the user's home directory."""
    found = find_config_in_parents()
    if found is not None:
        return found

    for filename in CONFIG_FILENAMES:
        candidate = Path.home() / filename
        if candidate.is_file():
            return candidate
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration mapping from a JSON, TOML, YAML or pyproject file.

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
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        loader: Callable[[Path], Any] = _load_pyproject_section
    else:
        ext = config_path.suffix.lower()
        if ext not in _LOADERS:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
        loader = _LOADERS[ext]

    try:
        config = loader(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        # TOMLDecodeError and JSONDecodeError are ValueError subclasses
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a table at root level, got {type(config).__name__}"
        )
    logger.debug("Loaded configuration from %s", config_path)
    return config


def options_from_config(config: Dict[str, Any], base: Optional[ConverterOptions] = None) -> ConverterOptions:
    """Build :class:`ConverterOptions` from a configuration mapping.

    Parameters
    ----------
    config : dict
        Mapping loaded by :func:`load_config_file`
    base : ConverterOptions, optional
        Options to update; defaults to ``ConverterOptions()``

    Returns
    -------
    ConverterOptions
        Options with the configured values applied

    Raises
    ------
    argparse.ArgumentTypeError
        If the mapping contains unknown keys or invalid values

    """
    base = base or ConverterOptions()
    values = {key.replace("-", "_"): value for key, value in config.items()}

    mappings = values.pop("language_mappings", None)
    if mappings:
        mapper = CodeBlockLanguageMapper(allow_unmapped_languages=values.pop("allow_unmapped_languages", True))
        for html_language, markdown_language in mappings.items():
            mapper.add_mapping(html_language, markdown_language)
        values["code_block_language_mapper"] = mapper

    if "escape_rules" in values:
        try:
            values["escape_rules"] = tuple(
                EscapeRule(pattern, replacement) for pattern, replacement in values["escape_rules"]
            )
        except (TypeError, ValueError) as e:
            raise argparse.ArgumentTypeError("escape_rules must be a list of [pattern, replacement] pairs") from e

    unknown = sorted(set(values) - ConverterOptions.field_names())
    if unknown:
        raise argparse.ArgumentTypeError(f"Unknown configuration option(s): {', '.join(unknown)}")

    try:
        return base.create_updated(**values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e
