"""Value types that flow through one release pipeline run.

A ReleaseRequest goes in, a PipelineResult comes out. Every externally
effectful step in between reports a StepOutcome.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from publish_release.exceptions import (
    FailureReason,
    InvalidDestinationError,
    ReleaseError,
)


class Destination(Enum):
    """Where a release is published."""

    GITHUB = "github"
    NPM = "npm"

    @classmethod
    def parse(cls, value: str | None) -> "Destination | None":
        """Parse a destination name.

        ``None`` (or an empty string) means "publish everywhere". The
        generic names ``host`` and ``registry`` are accepted as aliases.

        Raises:
            InvalidDestinationError: If the name is not recognized
        """
        if value is None or not value.strip():
            return None

        name = value.strip().lower()
        name = DESTINATION_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise InvalidDestinationError(
                f"unknown [dest]: {value}",
                details=f"Destination must be one of: {', '.join(d.value for d in cls)}",
                fix_hint="Use --dest github, --dest npm, or omit --dest to publish to both",
            ) from None


DESTINATION_ALIASES: dict[str, str] = {
    "host": Destination.GITHUB.value,
    "registry": Destination.NPM.value,
}


@dataclass(frozen=True)
class ReleaseRequest:
    """Input to the release pipeline.

    Attributes:
        version_token: major, minor, patch, or X.Y.Z (None means patch)
        destination: Raw destination name; None publishes everywhere
        auto_commit: Commit and push the bumped manifest before publishing
        quiet: Produce no console output
        verbose: Show full failure diagnostics
    """

    version_token: str | None = None
    destination: str | None = None
    auto_commit: bool = True
    quiet: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class ResolvedVersion:
    """Either a semantic bump keyword or an exact X.Y.Z version."""

    kind: Literal["bump", "exact"]
    value: str

    @classmethod
    def bump(cls, bump_type: str) -> "ResolvedVersion":
        return cls(kind="bump", value=bump_type)

    @classmethod
    def exact(cls, version: str) -> "ResolvedVersion":
        return cls(kind="exact", value=version)

    @property
    def is_bump(self) -> bool:
        return self.kind == "bump"


@dataclass(frozen=True)
class StepOutcome:
    """Result of one externally-effectful step.

    Attributes:
        success: Whether the step succeeded
        message: Brief description
        reason: Failure code (None on success)
        details: Command diagnostics for failures
        fix_hint: Suggested action for failures
    """

    success: bool
    message: str
    reason: FailureReason | None = None
    details: str | None = None
    fix_hint: str | None = None

    @classmethod
    def ok(cls, message: str) -> "StepOutcome":
        return cls(success=True, message=message)

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        message: str,
        details: str | None = None,
        fix_hint: str | None = None,
    ) -> "StepOutcome":
        return cls(
            success=False,
            message=message,
            reason=reason,
            details=details,
            fix_hint=fix_hint,
        )

    @classmethod
    def from_error(cls, error: ReleaseError) -> "StepOutcome":
        """Convert a pipeline exception into a failed outcome."""
        if error.reason is None:
            raise ValueError(f"{type(error).__name__} has no failure reason")
        return cls.failed(
            error.reason, error.message, details=error.details, fix_hint=error.fix_hint
        )


class PipelineStatus(Enum):
    """Terminal status of a pipeline run."""

    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineResult:
    """Terminal value of one release run.

    Attributes:
        status: OK or FAILED
        reason: Failure code (None when OK)
        message: Failure message shown to the user
        details: Extended diagnostics, shown in verbose mode
        fix_hint: Suggested action, shown in verbose mode
        version: Version written to the manifest, once the bump ran
    """

    status: PipelineStatus
    reason: FailureReason | None = None
    message: str = ""
    details: str | None = None
    fix_hint: str | None = None
    version: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == PipelineStatus.OK

    @classmethod
    def success(cls, version: str | None = None) -> "PipelineResult":
        return cls(status=PipelineStatus.OK, version=version)

    @classmethod
    def from_outcome(
        cls, outcome: StepOutcome, version: str | None = None
    ) -> "PipelineResult":
        """Build a FAILED result from a failed step."""
        return cls(
            status=PipelineStatus.FAILED,
            reason=outcome.reason,
            message=outcome.message,
            details=outcome.details,
            fix_hint=outcome.fix_hint,
            version=version,
        )

    @classmethod
    def from_error(cls, error: ReleaseError) -> "PipelineResult":
        """Build a FAILED result from a validation error."""
        return cls(
            status=PipelineStatus.FAILED,
            reason=error.reason,
            message=error.message,
            details=error.details,
            fix_hint=error.fix_hint,
        )
