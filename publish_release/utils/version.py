"""Version parsing, validation, and bumping utilities.

All version strings follow semantic versioning format: MAJOR.MINOR.PATCH.
Git tags carry a prefix (e.g., 'v1.2.3').
"""

import re
from typing import Literal

from publish_release.exceptions import ManifestError

BumpType = Literal["major", "minor", "patch"]
VersionTuple = tuple[int, int, int]

BUMP_TYPES: tuple[BumpType, ...] = ("major", "minor", "patch")

# Strict semver pattern without prefix
STRICT_SEMVER_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$", re.ASCII)


def parse_version(version_str: str) -> VersionTuple:
    """Parse a semantic version string into a tuple of integers.

    Args:
        version_str: Version string to parse (e.g., '1.2.3')

    Returns:
        Tuple of (major, minor, patch) as integers

    Raises:
        ManifestError: If version string doesn't match MAJOR.MINOR.PATCH

    Examples:
        >>> parse_version('1.2.3')
        (1, 2, 3)
    """
    match = STRICT_SEMVER_PATTERN.match(version_str.strip()) if version_str else None
    if not match:
        raise ManifestError(
            f"Invalid version format: '{version_str}'",
            details="Version must follow semantic versioning: MAJOR.MINOR.PATCH",
            fix_hint="Set the manifest version to something like '1.2.3' or release an exact version",
        )

    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def bump_version(current: str, bump_type: BumpType) -> str:
    """Bump a version string according to semantic versioning rules.

    The matching component is incremented and all lower components
    are reset to zero.

    Args:
        current: Current version string (e.g., '1.2.3')
        bump_type: Component to increment

    Returns:
        New version string (e.g., '1.2.4')

    Raises:
        ManifestError: If the current version cannot be parsed

    Examples:
        >>> bump_version('1.2.3', 'patch')
        '1.2.4'
        >>> bump_version('1.2.3', 'minor')
        '1.3.0'
        >>> bump_version('1.2.3', 'major')
        '2.0.0'
    """
    major, minor, patch = parse_version(current)

    if bump_type == "major":
        return f"{major + 1}.0.0"
    elif bump_type == "minor":
        return f"{major}.{minor + 1}.0"
    else:
        return f"{major}.{minor}.{patch + 1}"


def add_tag_prefix(version: str, prefix: str = "v") -> str:
    """Build a tag name from a version.

    Examples:
        >>> add_tag_prefix('1.2.3')
        'v1.2.3'
    """
    return f"{prefix}{version.strip()}"
