"""Custom exception hierarchy for the release tool.

Every failure the pipeline can report maps onto one FailureReason code.
The CLI exits with code 1 for all of them.
"""

from enum import Enum
from typing import ClassVar


class FailureReason(Enum):
    """Reason codes for a rejected release."""

    INVALID_DESTINATION = "InvalidDestination"
    INVALID_VERSION = "InvalidVersion"
    BUMP_FAILED = "BumpFailed"
    STAGE_FAILED = "StageFailed"
    COMMIT_FAILED = "CommitFailed"
    PUSH_FAILED = "PushFailed"
    TAG_FAILED = "TagFailed"
    TAG_PUSH_FAILED = "TagPushFailed"
    REGISTRY_PUBLISH_FAILED = "RegistryPublishFailed"


class ReleaseError(Exception):
    """Base exception for all release errors.

    All release-related exceptions inherit from this class.
    Subclasses raised inside the pipeline define a ``reason`` code.
    """

    exit_code: int = 1
    reason: ClassVar[FailureReason | None] = None

    def __init__(
        self,
        message: str,
        details: str | None = None,
        fix_hint: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Brief error message
            details: Detailed explanation of what went wrong
            fix_hint: Suggested command or action to fix the issue
        """
        super().__init__(message)
        self.message = message
        self.details = details
        self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"\nDetails: {self.details}")
        if self.fix_hint:
            parts.append(f"\nFix: {self.fix_hint}")
        return "".join(parts)


class ConfigurationError(ReleaseError):
    """Configuration file errors.

    Raised when:
    - Config file not found at an explicit path
    - Config file has invalid syntax (YAML/TOML)
    - Config values fail validation
    """


class ValidationError(ReleaseError):
    """Request validation failures, detected before any side effect."""


class InvalidDestinationError(ValidationError):
    """Destination is not one of the known publish targets."""

    reason = FailureReason.INVALID_DESTINATION


class InvalidVersionError(ValidationError):
    """Version token is neither a bump keyword nor X.Y.Z."""

    reason = FailureReason.INVALID_VERSION


class ManifestError(ReleaseError):
    """Manifest read/write failures.

    Raised when:
    - package.json is missing or unreadable
    - package.json is not valid JSON
    - The current version cannot be bumped
    - The rewritten manifest cannot be saved
    """

    reason = FailureReason.BUMP_FAILED


class GitError(ReleaseError):
    """Git operation failures.

    Raised when:
    - Staging the manifest fails
    - The bump commit fails
    - Pushing the branch or the tag fails
    - Tag creation fails
    """


class StageFailedError(GitError):
    reason = FailureReason.STAGE_FAILED


class CommitFailedError(GitError):
    reason = FailureReason.COMMIT_FAILED


class PushFailedError(GitError):
    reason = FailureReason.PUSH_FAILED


class TagFailedError(GitError):
    reason = FailureReason.TAG_FAILED


class TagPushFailedError(GitError):
    reason = FailureReason.TAG_PUSH_FAILED


class PublishError(ReleaseError):
    """Registry publishing failures."""

    reason = FailureReason.REGISTRY_PUBLISH_FAILED
