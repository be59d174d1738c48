"""Pytest fixtures for release tool tests.

Provides common fixtures for:
- Temporary project directories
- Git repositories with a bare "origin" remote
- package.json projects
- Release configurations whose registry command is a local Python one-liner
"""

import json
import os
import subprocess
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

from publish_release.config.models import NPMConfig, ReleaseConfig

# Marker file the fake registry command writes into the project root
PUBLISHED_MARKER = "npm-published.txt"

PUBLISH_OK_COMMAND = [
    sys.executable,
    "-c",
    f"import pathlib; pathlib.Path({PUBLISHED_MARKER!r}).write_text('published')",
]
PUBLISH_FAIL_COMMAND = [
    sys.executable,
    "-c",
    "import sys; sys.stderr.write('npm ERR! 403 Forbidden'); sys.exit(1)",
]


def git(*args: str, cwd: Path) -> str:
    """Run a git command in tests and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def read_manifest(project: Path) -> dict:
    return json.loads((project / "package.json").read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Temporarily remove PUBLISH_RELEASE_* environment variables."""
    old_env = {}
    for key in list(os.environ.keys()):
        if key.startswith("PUBLISH_RELEASE_"):
            old_env[key] = os.environ.pop(key)

    yield

    os.environ.update(old_env)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a temporary project directory."""
    project = tmp_path / "test-project"
    project.mkdir()
    return project


@pytest.fixture
def git_repo(project_dir: Path) -> Path:
    """Create a git repository on branch main in the project directory."""
    git("init", cwd=project_dir)
    git("symbolic-ref", "HEAD", "refs/heads/main", cwd=project_dir)
    git("config", "user.email", "test@test.com", cwd=project_dir)
    git("config", "user.name", "Test User", cwd=project_dir)
    git("config", "commit.gpgsign", "false", cwd=project_dir)
    git("config", "tag.gpgsign", "false", cwd=project_dir)
    return project_dir


@pytest.fixture
def package_json() -> str:
    """package.json text with deliberately non-default formatting."""
    return (
        "{\n"
        '    "name": "test-package",\n'
        '    "version": "1.2.3",\n'
        '    "description": "Test package",\n'
        '    "scripts": {"test": "echo test"},\n'
        '    "dependencies": {\n'
        '        "left-pad": "^1.3.0"\n'
        "    }\n"
        "}\n"
    )


@pytest.fixture
def local_project(git_repo: Path, package_json: str) -> Path:
    """A committed package.json project without any remote."""
    (git_repo / "package.json").write_text(package_json, encoding="utf-8")
    (git_repo / "index.js").write_text("module.exports = {};\n")
    git("add", ".", cwd=git_repo)
    git("commit", "-m", "Initial commit", cwd=git_repo)
    return git_repo


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    """Create a bare repository to act as origin."""
    remote = tmp_path / "origin.git"
    git("init", "--bare", str(remote), cwd=tmp_path)
    git("symbolic-ref", "HEAD", "refs/heads/main", cwd=remote)
    return remote


@pytest.fixture
def nodejs_project(local_project: Path, remote_repo: Path) -> Path:
    """A package.json project whose main branch is pushed to a bare origin."""
    git("remote", "add", "origin", str(remote_repo), cwd=local_project)
    git("push", "origin", "main", cwd=local_project)
    return local_project


@pytest.fixture
def release_config() -> ReleaseConfig:
    """Default config whose registry command succeeds and leaves a marker."""
    return ReleaseConfig(npm=NPMConfig(publish_command=PUBLISH_OK_COMMAND))


@pytest.fixture
def failing_registry_config() -> ReleaseConfig:
    """Default config whose registry command exits with status 1."""
    return ReleaseConfig(npm=NPMConfig(publish_command=PUBLISH_FAIL_COMMAND))
