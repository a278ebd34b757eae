from enum import Enum
from typing import Any

from ..core.interfaces import ReleaseSource
from .github import GitHubSource
from .modrinth import ModrinthSource
from .spigot import SpigotSource


class Platform(Enum):
    """Release platforms supported out of the box."""
    SPIGOT = "spigot"
    MODRINTH = "modrinth"
    GITHUB = "github"

    @property
    def source(self) -> ReleaseSource:
        """The release source implementing this platform."""
        return _SOURCES[self]

    @property
    def display_name(self) -> str:
        return self.source.name

    @property
    def url_template(self) -> str:
        return self.source.url_template

    def build_url(self, source_id: str) -> str:
        return self.source.build_url(source_id)

    def extract_latest(self, payload: Any) -> str:
        return self.source.extract_latest(payload)

    @classmethod
    def from_name(cls, name: str) -> "Platform":
        """Resolve a platform from its name, e.g. ``"github"`` or ``"GITHUB"``."""
        key = str(name).strip().lower()
        for platform in cls:
            if platform.value == key:
                return platform
        raise ValueError(f"Unknown platform '{name}'. Available: {', '.join(p.value for p in cls)}")


_SOURCES = {
    Platform.SPIGOT: SpigotSource(),
    Platform.MODRINTH: ModrinthSource(),
    Platform.GITHUB: GitHubSource(),
}
