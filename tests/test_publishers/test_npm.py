"""Tests for the npm registry publisher.

The registry command is replaced through config with a local Python
one-liner, so no network access or npm installation is needed.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from conftest import PUBLISHED_MARKER

from publish_release.config.models import NPMConfig, ReleaseConfig
from publish_release.exceptions import FailureReason
from publish_release.publishers import PublishContext
from publish_release.publishers.npm import NPMPublisher


class TestNPMPublisher:
    def test_runs_publish_command_in_project_root(
        self,
        local_project: Path,
        release_config: ReleaseConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        context = PublishContext(project_root=local_project, config=release_config)

        outcome = NPMPublisher().publish(context)

        assert outcome.success, outcome.message
        assert (local_project / PUBLISHED_MARKER).read_text() == "published"
        assert "Published '1.2.3' to 'npm'" in capsys.readouterr().out

    def test_failure_is_registry_publish_failed(
        self, local_project: Path, failing_registry_config: ReleaseConfig
    ) -> None:
        context = PublishContext(project_root=local_project, config=failing_registry_config)

        outcome = NPMPublisher().publish(context)

        assert outcome.success is False
        assert outcome.reason == FailureReason.REGISTRY_PUBLISH_FAILED
        assert "exited with 1" in outcome.message
        assert "403" in (outcome.details or "")

    def test_missing_executable_is_registry_publish_failed(self, project_dir: Path) -> None:
        config = ReleaseConfig(npm=NPMConfig(publish_command=["definitely-not-npm-xyz"]))
        context = PublishContext(project_root=project_dir, config=config)

        outcome = NPMPublisher().publish(context)

        assert outcome.reason == FailureReason.REGISTRY_PUBLISH_FAILED
        assert "127" in outcome.message

    def test_default_command_is_npm_publish(self, project_dir: Path) -> None:
        context = PublishContext(project_root=project_dir, config=ReleaseConfig(), quiet=True)

        with patch("publish_release.publishers.npm.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="")
            outcome = NPMPublisher().publish(context)

        assert outcome.success
        mock_run.assert_called_once_with(["npm", "publish"], cwd=project_dir)
