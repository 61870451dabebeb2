#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration files for the textfind command line tool.

A configuration file holds the default find preferences under a ``find``
table. Supported files, in the order they are looked for in each directory:

1. ``.textfind.toml``
2. ``.textfind.yaml`` / ``.textfind.yml``
3. ``.textfind.json``
4. ``pyproject.toml`` with a ``[tool.textfind]`` table

The search walks from the working directory up to the filesystem root and
then falls back to the user's home directory. An explicit ``--config`` path
or the ``TEXTFIND_CONFIG`` environment variable skips discovery altogether.

Every loading problem is reported as :class:`argparse.ArgumentTypeError` so
the CLI can print it next to other argument errors.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from textfind.constants import CONFIG_SECTION
from textfind.exceptions import ValidationError
from textfind.options.settings import FindSettings

DEDICATED_CONFIG_FILENAMES = [".textfind.toml", ".textfind.yaml", ".textfind.yml", ".textfind.json"]
CONFIG_FILENAMES = [*DEDICATED_CONFIG_FILENAMES, "pyproject.toml"]


def _parse_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _parse_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _parse_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


# suffix -> (format label, parser, decode error type)
_PARSERS: Dict[str, tuple[str, Callable[[Path], Any], type[Exception]]] = {
    ".toml": ("TOML", _parse_toml, tomllib.TOMLDecodeError),
    ".json": ("JSON", _parse_json, json.JSONDecodeError),
    ".yaml": ("YAML", _parse_yaml, yaml.YAMLError),
    ".yml": ("YAML", _parse_yaml, yaml.YAMLError),
}


def _read_document(path: Path, suffix: str) -> Any:
    label, parse, decode_error = _PARSERS[suffix]
    try:
        return parse(path)
    except decode_error as e:
        raise argparse.ArgumentTypeError(f"Invalid {label} in config file {path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading {label} config {path}: {e}") from e


def _load_pyproject_textfind_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.textfind]`` table of a ``pyproject.toml``.

    An absent table yields an empty dict.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is unreadable, is not valid TOML, or the table is not a table

    """
    data = _read_document(pyproject_path, ".toml")
    section = data.get("tool", {}).get("textfind")
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.textfind] section in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def _config_in_directory(directory: Path) -> Optional[Path]:
    for filename in DEDICATED_CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate

    pyproject = directory / "pyproject.toml"
    if pyproject.is_file():
        try:
            has_section = bool(_load_pyproject_textfind_section(pyproject))
        except argparse.ArgumentTypeError:
            # A broken pyproject.toml belongs to someone else; keep looking
            has_section = False
        if has_section:
            return pyproject
    return None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Return the nearest configuration file at or above ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from; defaults to the working directory

    Returns
    -------
    Path or None
        The first file found, or None when no directory holds one

    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        found = _config_in_directory(directory)
        if found is not None:
            return found
    return None


def discover_config_file() -> Optional[Path]:
    """Locate a configuration file for the current invocation.

    The working directory and its parents are searched first, then the
    dedicated file names in the home directory.
    """
    found = find_config_in_parents()
    if found is not None:
        return found

    home = Path.home()
    return next((home / name for name in DEDICATED_CONFIG_FILENAMES if (home / name).is_file()), None)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration file into a dictionary.

    Parameters
    ----------
    config_path : Path or str
        A ``.toml``, ``.yaml``/``.yml``, ``.json`` or ``pyproject.toml`` file

    Returns
    -------
    dict
        The parsed document; for ``pyproject.toml`` only the
        ``[tool.textfind]`` table

    Raises
    ------
    argparse.ArgumentTypeError
        If the path is missing, unsupported, unreadable or malformed

    Examples
    --------
    >>> load_config_file(".textfind.toml")
    {'find': {'case_sensitive': True}}

    """
    path = Path(config_path)
    if not path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {path}")
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {path}")

    if path.name.lower() == "pyproject.toml":
        return _load_pyproject_textfind_section(path)

    suffix = path.suffix.lower()
    if suffix not in _PARSERS:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {suffix}. Use .json, .toml, or .yaml")

    document = _read_document(path, suffix)
    # An empty YAML file parses to None
    if document is None:
        return {}
    if not isinstance(document, dict):
        kind = "an object" if suffix == ".json" else "a mapping"
        raise argparse.ArgumentTypeError(
            f"{_PARSERS[suffix][0]} config file must contain {kind}, got {type(document).__name__}"
        )
    return document


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the configuration that applies to this run.

    ``explicit_path`` (from ``--config``) wins over ``env_var_path`` (from
    ``TEXTFIND_CONFIG``), which wins over discovery. Returns an empty dict
    when nothing is configured.
    """
    chosen = explicit_path or env_var_path or discover_config_file()
    if not chosen:
        return {}
    return load_config_file(chosen)


def settings_from_config(config: Dict[str, Any]) -> FindSettings:
    """Build :class:`FindSettings` from the ``find`` table of a loaded config.

    Raises
    ------
    argparse.ArgumentTypeError
        If the table is not a mapping or holds invalid values

    """
    section = config.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(f"[{CONFIG_SECTION}] must be a table, got {type(section).__name__}")
    try:
        return FindSettings.from_mapping(section)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(f"Invalid [{CONFIG_SECTION}] configuration: {e}") from e


def get_config_search_paths() -> list[Path]:
    """Return the candidate configuration paths in search order.

    Only the working directory and the home directory are listed; parent
    directories are searched as well but not enumerated here.
    """
    cwd = Path.cwd()
    home = Path.home()
    return [cwd / name for name in CONFIG_FILENAMES] + [home / name for name in DEDICATED_CONFIG_FILENAMES]
