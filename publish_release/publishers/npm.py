"""npm registry publisher.

Runs the configured publish command (``npm publish`` by default) with no
extra arguments in the project root. Authentication is whatever the
environment already provides (~/.npmrc, NODE_AUTH_TOKEN, OIDC).
"""

import logging
from typing import ClassVar

from publish_release.exceptions import ManifestError, PublishError
from publish_release.manifest import read_version
from publish_release.models import StepOutcome
from publish_release.publishers.base import PublishContext, Publisher, PublisherRegistry
from publish_release.utils.shell import ShellError, run

logger = logging.getLogger(__name__)


@PublisherRegistry.register
class NPMPublisher(Publisher):
    """Publisher for the npm registry."""

    name: ClassVar[str] = "npm"
    display_name: ClassVar[str] = "npm Registry"

    def publish(self, context: PublishContext) -> StepOutcome:
        cmd = context.config.npm.publish_command

        try:
            result = run(cmd, cwd=context.project_root)
        except ShellError as e:
            return StepOutcome.from_error(
                PublishError(
                    f"failed to publish release to npm ({e})",
                    details=e.diagnostics,
                    fix_hint="Check npm authentication (npm whoami) and that this version is not already published",
                )
            )

        if result.stdout:
            logger.debug("%s output:\n%s", " ".join(cmd), result.stdout)

        try:
            label = read_version(context.manifest_path)
        except ManifestError:
            label = context.project_root.name
        self.log_published(context, label)
        return StepOutcome.ok("Published to npm")
