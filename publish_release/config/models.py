"""Pydantic v2 configuration models.

Every field has a default, so a project without a config file releases
``package.json`` to origin/main and npm.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ManifestConfig(BaseModel):
    """Manifest location and tag naming."""

    file: str = Field(
        default="package.json",
        description="Manifest file, relative to the project root",
    )
    tag_prefix: str = Field(
        default="v",
        description="Prefix for git tags (e.g., 'v' for v1.0.0)",
    )

    @field_validator("tag_prefix")
    @classmethod
    def validate_tag_prefix(cls, v: str) -> str:
        if v and not v.isalnum():
            raise ValueError("tag_prefix must be alphanumeric or empty")
        return v


class GitConfig(BaseModel):
    """Git workflow configuration."""

    main_branch: str = Field(
        default="main",
        description="Branch the bump commit is pushed to",
    )
    remote: str = Field(
        default="origin",
        description="Git remote name",
    )
    commit_message: str = Field(
        default="Bumping to version {version}",
        description="Bump commit message; {version} is replaced with the new version",
    )

    @field_validator("commit_message")
    @classmethod
    def validate_commit_message(cls, v: str) -> str:
        if "{version}" not in v:
            raise ValueError("commit_message must contain the {version} placeholder")
        try:
            v.format(version="0.0.0")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                "commit_message may only use the {version} field; "
                f"write literal braces as {{{{ and }}}} ({type(e).__name__}: {e})"
            ) from None
        return v

    def format_commit_message(self, version: str) -> str:
        return self.commit_message.format(version=version)


class NPMConfig(BaseModel):
    """Registry publishing configuration."""

    publish_command: list[str] = Field(
        default_factory=lambda: ["npm", "publish"],
        min_length=1,
        description="Command run in the project root to publish to the registry",
    )


class ReleaseConfig(BaseSettings):
    """Root configuration model.

    Supports environment variable overrides with PUBLISH_RELEASE_ prefix.
    Example: PUBLISH_RELEASE_GIT__MAIN_BRANCH=master
    """

    manifest: ManifestConfig = Field(default_factory=ManifestConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    npm: NPMConfig = Field(default_factory=NPMConfig)

    model_config = {
        "env_prefix": "PUBLISH_RELEASE_",
        "env_nested_delimiter": "__",
    }
