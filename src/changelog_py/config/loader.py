"""Loading configuration from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from changelog_py.config.models import ChangelogPyConfig
from changelog_py.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_SECTION = "changelog-py"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find the nearest pyproject.toml, searching upward.

    Args:
        start: Directory to start from (defaults to the cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def find_project_root(start: Path | None = None) -> Path:
    """Return the directory holding the nearest pyproject.toml.

    Falls back to start (or the cwd) when there is no pyproject.toml,
    which is also where the default configuration applies.
    """
    try:
        return find_pyproject_toml(start).parent
    except ConfigNotFoundError:
        return (start or Path.cwd()).resolve()


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and decode a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def extract_changelog_py_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the [tool.changelog-py] table, or {} if absent."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def load_config(path: Path | None = None) -> ChangelogPyConfig:
    """Load configuration for the project containing path.

    A project without pyproject.toml, or without a [tool.changelog-py]
    section, gets the default configuration.

    Args:
        path: Project directory, or a file inside it

    Returns:
        Validated configuration

    Raises:
        ConfigError: If pyproject.toml cannot be decoded
        ConfigValidationError: If the section holds invalid values
    """
    start = path.parent if path is not None and path.is_file() else path
    try:
        pyproject_path = find_pyproject_toml(start)
    except ConfigNotFoundError:
        logger.debug("No pyproject.toml found, using default configuration")
        return ChangelogPyConfig()

    raw = extract_changelog_py_config(load_pyproject_toml(pyproject_path))
    try:
        config = ChangelogPyConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_SECTION}] in {pyproject_path}:\n{e}") from e

    logger.debug("Loaded configuration from %s", pyproject_path)
    return config
