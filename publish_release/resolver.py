"""Resolve the user-supplied version token.

A token is either a bump keyword (major, minor, patch; any case) or an
explicit three-part numeric version. Components of an explicit version may
be separated by dots or by whitespace, so "1 2 3" resolves to "1.2.3".
"""

import re

from publish_release.exceptions import InvalidVersionError
from publish_release.models import ResolvedVersion
from publish_release.utils.version import BUMP_TYPES

DEFAULT_BUMP = "patch"

EXACT_VERSION_PATTERN = re.compile(r"^(\d+)(?:\.|\s+)(\d+)(?:\.|\s+)(\d+)$", re.ASCII)


def resolve(token: str | None) -> ResolvedVersion:
    """Resolve a version token.

    Args:
        token: major, minor, patch, X.Y.Z, or None for the default bump

    Returns:
        ResolvedVersion of kind "bump" or "exact"

    Raises:
        InvalidVersionError: If the token matches neither form

    Examples:
        >>> resolve(None)
        ResolvedVersion(kind='bump', value='patch')
        >>> resolve('Minor')
        ResolvedVersion(kind='bump', value='minor')
        >>> resolve('1 2 3')
        ResolvedVersion(kind='exact', value='1.2.3')
    """
    if token is None or not token.strip():
        return ResolvedVersion.bump(DEFAULT_BUMP)

    stripped = token.strip()

    keyword = stripped.lower()
    if keyword in BUMP_TYPES:
        return ResolvedVersion.bump(keyword)

    match = EXACT_VERSION_PATTERN.match(stripped)
    if match:
        return ResolvedVersion.exact(".".join(match.groups()))

    raise InvalidVersionError(
        f"unknown [version]: {token}",
        details="Version must be one of major, minor, patch, or a version like X.Y.Z",
        fix_hint="Use 'major', 'minor', 'patch', or a version like '2.0.0'",
    )
