"""Utility modules for the release tool."""

from publish_release.utils.output import configure_logging, console, quiet_output
from publish_release.utils.shell import ShellError, run, strip_ansi
from publish_release.utils.version import (
    BUMP_TYPES,
    STRICT_SEMVER_PATTERN,
    BumpType,
    VersionTuple,
    add_tag_prefix,
    bump_version,
    parse_version,
)

__all__ = [
    # Console utilities
    "console",
    "configure_logging",
    "quiet_output",
    # Shell utilities
    "run",
    "strip_ansi",
    "ShellError",
    # Version utilities
    "parse_version",
    "bump_version",
    "add_tag_prefix",
    "BumpType",
    "VersionTuple",
    "BUMP_TYPES",
    "STRICT_SEMVER_PATTERN",
]
