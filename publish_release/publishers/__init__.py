"""Publisher modules for release destinations."""

# Import publishers to trigger registration
from publish_release.publishers import (
    github,  # noqa: F401
    npm,  # noqa: F401
)
from publish_release.publishers.base import (
    PublishContext,
    Publisher,
    PublisherRegistry,
)

__all__ = [
    "PublishContext",
    "Publisher",
    "PublisherRegistry",
]
