"""Bump and publish a package release to npm and/or GitHub."""

__version__ = "1.3.0"

from publish_release.exceptions import (  # noqa: E402
    ConfigurationError,
    FailureReason,
    GitError,
    ManifestError,
    PublishError,
    ReleaseError,
    ValidationError,
)

__all__ = [
    "__version__",
    "FailureReason",
    "ReleaseError",
    "ConfigurationError",
    "ValidationError",
    "ManifestError",
    "GitError",
    "PublishError",
]
