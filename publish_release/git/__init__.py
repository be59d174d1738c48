"""Git operations used by the release pipeline."""

from publish_release.git.operations import commit, push, push_tag, stage, tag

__all__ = [
    "stage",
    "commit",
    "push",
    "tag",
    "push_tag",
]
