"""GitHub publisher.

Publishing to GitHub means tagging the current commit ``v<version>`` and
pushing that tag to the remote. The version is read from the manifest at
the moment of tagging.
"""

from typing import ClassVar

from publish_release.exceptions import FailureReason, GitError, ManifestError
from publish_release.git import operations as git_ops
from publish_release.manifest import read_version
from publish_release.models import StepOutcome
from publish_release.publishers.base import PublishContext, Publisher, PublisherRegistry
from publish_release.utils.version import add_tag_prefix


@PublisherRegistry.register
class GitHubPublisher(Publisher):
    """Tag the release commit and push the tag."""

    name: ClassVar[str] = "github"
    display_name: ClassVar[str] = "GitHub"

    def publish(self, context: PublishContext) -> StepOutcome:
        try:
            version = read_version(context.manifest_path)
        except ManifestError as e:
            # No version means there is nothing to name the tag after
            return StepOutcome.failed(
                FailureReason.TAG_FAILED,
                f"failed to create git tag: {e.message}",
                details=e.details,
                fix_hint=e.fix_hint,
            )

        tag_name = add_tag_prefix(version, context.config.manifest.tag_prefix)
        remote = context.config.git.remote

        try:
            git_ops.tag(tag_name, cwd=context.project_root)
            git_ops.push_tag(tag_name, remote=remote, cwd=context.project_root)
        except GitError as e:
            return StepOutcome.from_error(e)

        self.log_published(context, tag_name)
        return StepOutcome.ok(f"Pushed tag {tag_name} to {remote}")
