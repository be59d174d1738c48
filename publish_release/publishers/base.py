"""Abstract base class for release destinations.

Publishers handle the final step of releasing:
- github: tag the current commit and push the tag
- npm: run the registry publish command
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from publish_release.models import StepOutcome
from publish_release.utils.output import console

if TYPE_CHECKING:
    from publish_release.config.models import ReleaseConfig


@dataclass(frozen=True)
class PublishContext:
    """Context passed to publishers during publishing.

    The version is deliberately absent: publishers read it from the
    manifest on disk when they need it.
    """

    project_root: Path
    config: "ReleaseConfig"
    quiet: bool = False
    verbose: bool = False

    @property
    def manifest_path(self) -> Path:
        return self.project_root / self.config.manifest.file


class Publisher(ABC):
    """Abstract base class for all publishers."""

    # Class-level attributes to be defined by subclasses
    name: ClassVar[str]
    display_name: ClassVar[str]

    @abstractmethod
    def publish(self, context: PublishContext) -> StepOutcome:
        """Publish the release to this destination.

        Args:
            context: Publish context with project root and config

        Returns:
            StepOutcome indicating success/failure
        """

    def log_published(self, context: PublishContext, label: str) -> None:
        """Print the "Published" line unless quiet."""
        if not context.quiet:
            console.print(
                f"Published '[magenta]{label}[/magenta]' to '[cyan]{self.name}[/cyan]'"
            )


class PublisherRegistry:
    """Registry for publisher implementations, keyed by destination name."""

    _publishers: dict[str, type[Publisher]] = {}

    @classmethod
    def register(cls, publisher_class: type[Publisher]) -> type[Publisher]:
        """Class decorator adding a publisher under its ``name``.

        Raises:
            TypeError: If ``name`` or ``display_name`` is not set
            ValueError: If another class already owns the name
        """
        missing = [
            attr for attr in ("name", "display_name") if not hasattr(publisher_class, attr)
        ]
        if missing:
            raise TypeError(
                f"{publisher_class.__name__} must define class attributes: {', '.join(missing)}"
            )

        name = publisher_class.name
        if not isinstance(name, str) or not name:
            raise TypeError(f"{publisher_class.__name__}.name must be a non-empty string")

        existing = cls._publishers.setdefault(name, publisher_class)
        if existing is not publisher_class:
            raise ValueError(
                f"Destination '{name}' already registered by {existing.__name__}"
            )
        return publisher_class

    @classmethod
    def get(cls, name: str) -> type[Publisher] | None:
        return cls._publishers.get(name)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Registered destination names, in registration order."""
        return list(cls._publishers)
