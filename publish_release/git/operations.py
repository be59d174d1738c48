"""Git state modification operations.

Each function runs exactly one git command through
publish_release.utils.shell.run() and raises the matching GitError subclass
on failure. Nothing here parses git output.
"""

from pathlib import Path

from publish_release.exceptions import (
    CommitFailedError,
    PushFailedError,
    StageFailedError,
    TagFailedError,
    TagPushFailedError,
)
from publish_release.utils.shell import ShellError, run


def stage(path: str | Path, cwd: Path | None = None) -> None:
    """Stage a single file.

    Raises:
        StageFailedError: If git add fails
    """
    try:
        # List format handles filenames with spaces/special chars
        run(["git", "add", str(path)], cwd=cwd, check=True)
    except ShellError as e:
        raise StageFailedError(
            f"failed to stage {Path(path).name}",
            details=e.diagnostics,
            fix_hint="Ensure you are inside a git repository",
        ) from e


def commit(message: str, cwd: Path | None = None) -> None:
    """Commit the staged changes.

    Raises:
        CommitFailedError: If git commit fails or nothing is staged
    """
    try:
        run(["git", "commit", "-m", message], cwd=cwd, check=True)
    except ShellError as e:
        raise CommitFailedError(
            "failed to commit version bump",
            details=e.diagnostics,
            fix_hint="Run 'git status' to check staged changes and git identity",
        ) from e


def push(remote: str = "origin", branch: str = "main", cwd: Path | None = None) -> None:
    """Push a branch to a remote.

    Raises:
        PushFailedError: If git push fails
    """
    try:
        run(["git", "push", remote, branch], cwd=cwd, check=True)
    except ShellError as e:
        raise PushFailedError(
            f"failed to push commit to {remote}/{branch}",
            details=e.diagnostics,
            fix_hint="Ensure remote exists and you have push access. Check network connectivity.",
        ) from e


def tag(name: str, cwd: Path | None = None) -> None:
    """Create a lightweight tag at HEAD.

    Raises:
        TagFailedError: If tag creation fails or the tag already exists
    """
    try:
        run(["git", "tag", name], cwd=cwd, check=True)
    except ShellError as e:
        raise TagFailedError(
            f"failed to create git tag {name}",
            details=e.diagnostics,
            fix_hint=f"Ensure tag '{name}' doesn't already exist. Run 'git tag -d {name}' to delete it first.",
        ) from e


def push_tag(name: str, remote: str = "origin", cwd: Path | None = None) -> None:
    """Push a single tag to a remote.

    Raises:
        TagPushFailedError: If the push fails
    """
    try:
        run(["git", "push", remote, f"refs/tags/{name}"], cwd=cwd, check=True)
    except ShellError as e:
        raise TagPushFailedError(
            f"failed to publish release {name} to {remote}",
            details=e.diagnostics,
            fix_hint="Ensure remote exists and you have push access. Check network connectivity.",
        ) from e
