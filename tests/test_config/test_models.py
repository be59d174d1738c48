"""Unit tests for Pydantic configuration models."""

import pytest
from pydantic import ValidationError

from publish_release.config.models import GitConfig, ManifestConfig, NPMConfig, ReleaseConfig


class TestDefaults:
    def test_release_config_defaults(self) -> None:
        config = ReleaseConfig()

        assert config.manifest.file == "package.json"
        assert config.manifest.tag_prefix == "v"
        assert config.git.remote == "origin"
        assert config.git.main_branch == "main"
        assert config.git.commit_message.format(version="1.0.1") == "Bumping to version 1.0.1"
        assert config.npm.publish_command == ["npm", "publish"]

    def test_nested_dicts_are_validated(self) -> None:
        config = ReleaseConfig(git={"main_branch": "master"})  # type: ignore[arg-type]
        assert isinstance(config.git, GitConfig)
        assert config.git.remote == "origin"


class TestValidators:
    @pytest.mark.parametrize("prefix", ["v", "release", ""])
    def test_valid_tag_prefix(self, prefix: str) -> None:
        assert ManifestConfig(tag_prefix=prefix).tag_prefix == prefix

    @pytest.mark.parametrize("prefix", ["v-", "rel/", "v 1"])
    def test_invalid_tag_prefix(self, prefix: str) -> None:
        with pytest.raises(ValidationError):
            ManifestConfig(tag_prefix=prefix)

    def test_commit_message_requires_placeholder(self) -> None:
        with pytest.raises(ValidationError, match="placeholder"):
            GitConfig(commit_message="Bump version")

    def test_publish_command_cannot_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            NPMConfig(publish_command=[])

    @pytest.mark.parametrize(
        "template",
        [
            "chore(release): {version} {scope}",
            "{0} {version}",
            "{version} {version!z}",
            "release {version} {",
        ],
    )
    def test_commit_message_rejects_unformattable_template(self, template: str) -> None:
        with pytest.raises(ValidationError, match="only use the"):
            GitConfig(commit_message=template)

    def test_commit_message_allows_escaped_braces(self) -> None:
        config = GitConfig(commit_message="chore: {version} {{skip ci}}")
        assert config.format_commit_message("1.2.4") == "chore: 1.2.4 {skip ci}"
