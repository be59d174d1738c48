"""Release pipeline orchestration.

Coordinates one release:
1. Validate the destination and resolve the version token (no side effects)
2. Bump the manifest version
3. Commit and push the bump (when auto-commit is on)
4. Publish to GitHub, npm, or both concurrently

Every failure after step 1 leaves earlier side effects in place. The bumped
manifest, the bump commit and any pushed tag are never rolled back.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from publish_release import manifest
from publish_release.config.models import ReleaseConfig
from publish_release.exceptions import GitError, ManifestError, ValidationError
from publish_release.git import operations as git_ops
from publish_release.models import (
    Destination,
    PipelineResult,
    ReleaseRequest,
    ResolvedVersion,
    StepOutcome,
)
from publish_release.publishers import PublishContext, PublisherRegistry
from publish_release.resolver import resolve
from publish_release.utils.output import console, quiet_output

logger = logging.getLogger(__name__)

# Fan-out order; on a double failure the first entry's failure is reported
PUBLISH_ORDER: tuple[Destination, ...] = (Destination.GITHUB, Destination.NPM)


@dataclass
class ReleasePipeline:
    """Runs one release request against a project directory."""

    request: ReleaseRequest
    config: ReleaseConfig = field(default_factory=ReleaseConfig)
    project_root: Path = field(default_factory=Path.cwd)

    @property
    def manifest_path(self) -> Path:
        return self.project_root / self.config.manifest.file

    def run(self) -> PipelineResult:
        """Execute the pipeline.

        A quiet request silences console and logging output for the whole
        run, whatever logging the caller configured.

        Returns:
            PipelineResult; OK only if every step that ran succeeded
        """
        with quiet_output(self.request.quiet):
            return self._run()

    def _run(self) -> PipelineResult:
        try:
            destination = Destination.parse(self.request.destination)
            resolved = resolve(self.request.version_token)
        except ValidationError as e:
            logger.debug("Request rejected before any side effect: %s", e.message)
            return PipelineResult.from_error(e)

        steps: list[tuple[str, Callable[[], StepOutcome]]] = [
            ("Bumping version", lambda: self.bump_manifest(resolved)),
        ]
        if self.request.auto_commit:
            steps.append(("Committing version bump", self.commit_and_push))
        steps.append(("Publishing", lambda: self.publish(destination)))

        for step_name, step_func in steps:
            logger.debug("%s...", step_name)
            outcome = step_func()
            if not outcome.success:
                logger.debug("%s failed: %s", step_name, outcome.message)
                return PipelineResult.from_outcome(outcome, version=self.current_version())
            logger.debug("%s: %s", step_name, outcome.message)

        if not self.request.quiet:
            console.print()
            console.print("[green]Done![/green]")

        return PipelineResult.success(version=self.current_version())

    def current_version(self) -> str | None:
        """Version on disk right now, or None if it cannot be read."""
        try:
            return manifest.read_version(self.manifest_path)
        except ManifestError:
            return None

    def bump_manifest(self, resolved: ResolvedVersion) -> StepOutcome:
        """Rewrite the manifest version."""
        return manifest.bump(resolved, self.manifest_path, quiet=self.request.quiet)

    def commit_and_push(self) -> StepOutcome:
        """Stage, commit and push the bumped manifest.

        Any failing sub-step aborts the release, so nothing is published
        for a version the repository does not record.
        """
        git = self.config.git
        try:
            version = manifest.read_version(self.manifest_path)
            git_ops.stage(self.config.manifest.file, cwd=self.project_root)
            git_ops.commit(git.format_commit_message(version), cwd=self.project_root)
            git_ops.push(remote=git.remote, branch=git.main_branch, cwd=self.project_root)
        except (GitError, ManifestError) as e:
            return StepOutcome.from_error(e)

        if not self.request.quiet:
            console.print(f"Pushed commit to '[cyan]{git.main_branch}[/cyan]'")
        return StepOutcome.ok(f"Committed and pushed version {version}")

    def publish(self, destination: Destination | None) -> StepOutcome:
        """Publish to one destination, or to all of them concurrently."""
        context = PublishContext(
            project_root=self.project_root,
            config=self.config,
            quiet=self.request.quiet,
            verbose=self.request.verbose,
        )

        if destination is not None:
            return self.publish_to(destination, context)

        with ThreadPoolExecutor(max_workers=len(PUBLISH_ORDER)) as pool:
            futures = [pool.submit(self.publish_to, dest, context) for dest in PUBLISH_ORDER]
            outcomes = [future.result() for future in futures]

        for outcome in outcomes:
            if not outcome.success:
                return outcome
        return StepOutcome.ok("Published to " + ", ".join(d.value for d in PUBLISH_ORDER))

    def publish_to(self, destination: Destination, context: PublishContext) -> StepOutcome:
        publisher_class = PublisherRegistry.get(destination.value)
        if publisher_class is None:
            raise LookupError(f"No publisher registered for '{destination.value}'")
        return publisher_class().publish(context)


def execute_release(
    request: ReleaseRequest,
    config: ReleaseConfig | None = None,
    project_root: Path | None = None,
) -> PipelineResult:
    """Run a release request.

    This is the main entry point for running a release.

    Args:
        request: What to release and where
        config: Release configuration (defaults apply when None)
        project_root: Directory holding the manifest (defaults to cwd)

    Returns:
        The pipeline's terminal result
    """
    pipeline = ReleasePipeline(
        request=request,
        config=config if config is not None else ReleaseConfig(),
        project_root=project_root if project_root is not None else Path.cwd(),
    )
    return pipeline.run()
