"""Configuration management for the release tool."""

from publish_release.config.loader import load_config
from publish_release.config.models import (
    GitConfig,
    ManifestConfig,
    NPMConfig,
    ReleaseConfig,
)

__all__ = [
    "load_config",
    "ReleaseConfig",
    "ManifestConfig",
    "GitConfig",
    "NPMConfig",
]
