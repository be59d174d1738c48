"""Locate and load the optional release configuration file.

YAML and TOML are both accepted. A project without any config file gets
the defaults from ReleaseConfig; PUBLISH_RELEASE_* environment variables
apply on top either way.
"""

import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from publish_release.config.models import ReleaseConfig
from publish_release.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Tried in order, relative to the project root
SEARCH_PATHS = [
    "release_conf.yml",
    "release_conf.yaml",
    ".publish-release.yml",
    "publish_release.toml",
]


def _missing(path: Path) -> ConfigurationError:
    return ConfigurationError(
        f"Configuration file not found: {path}",
        fix_hint="Create the file or drop --config to use defaults",
    )


def load_yaml(path: Path) -> dict[str, Any]:
    """Parse a YAML file; an empty document is an empty mapping.

    Raises:
        ConfigurationError: If the file is missing or not valid YAML
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise _missing(path) from None

    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {path}",
            details=str(e),
            fix_hint="Check YAML syntax at the indicated line",
        ) from e


def load_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file.

    Raises:
        ConfigurationError: If the file is missing or not valid TOML
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise _missing(path) from None

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in {path}",
            details=str(e),
            fix_hint="Check TOML syntax at the indicated line",
        ) from e


LOADERS: dict[str, Callable[[Path], dict[str, Any]]] = {
    ".yml": load_yaml,
    ".yaml": load_yaml,
    ".toml": load_toml,
}


def find_config(project_root: Path) -> Path | None:
    """First existing entry of SEARCH_PATHS under project_root, if any."""
    return next(
        (project_root / name for name in SEARCH_PATHS if (project_root / name).exists()),
        None,
    )


def load_config(
    path: Path | None = None,
    project_root: Path | None = None,
) -> ReleaseConfig:
    """Build the release configuration.

    Args:
        path: Explicit config file; relative paths resolve against
            project_root. It must exist.
        project_root: Where to search for a config file (defaults to cwd)

    Returns:
        Validated ReleaseConfig (all defaults when no file is found)

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    root = project_root if project_root is not None else Path.cwd()

    if path:
        config_path: Path | None = Path(path) if Path(path).is_absolute() else root / path
    else:
        config_path = find_config(root)

    if config_path is None:
        logger.debug("No configuration file in %s; using defaults", root)
        return ReleaseConfig()

    loader = LOADERS.get(config_path.suffix)
    if loader is None:
        raise ConfigurationError(
            f"Unsupported config format: {config_path.suffix}",
            fix_hint="Use .yml, .yaml, or .toml extension",
        )

    data = loader(config_path)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in {config_path}",
            details="Top level must be a mapping",
        )

    try:
        config = ReleaseConfig(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}",
            details=str(e),
            fix_hint="Check the configuration values match expected types",
        ) from e

    logger.debug("Loaded configuration from %s", config_path)
    return config
