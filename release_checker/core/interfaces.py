from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .models import HttpResponse


class VersionComparator(ABC):
    """Abstract base class for version comparison schemes."""

    @abstractmethod
    def compare(self, first: str, second: str) -> Optional[str]:
        """
        Return whichever of ``first`` and ``second`` is newer.

        ``first`` is the installed version and ``second`` the remote one.
        Returns None if the scheme cannot compare the inputs.
        """
        pass

    def __call__(self, first: str, second: str) -> Optional[str]:
        return self.compare(first, second)


class ReleaseSource(ABC):
    """Abstract base class for release API platforms."""

    name: str = "release source"

    @property
    @abstractmethod
    def url_template(self) -> str:
        """URL with a single ``%s`` slot for the project identifier."""
        pass

    @abstractmethod
    def extract_latest(self, payload: Any) -> str:
        """Return the latest version from a parsed response body."""
        pass

    def build_url(self, source_id: str) -> str:
        """Substitute the project identifier into the URL template."""
        return self.url_template % source_id


class Transport(ABC):
    """Abstract base class for blocking HTTP transports."""

    @abstractmethod
    def fetch(self, url: str, headers: Dict[str, str], timeout: float) -> HttpResponse:
        """Perform a GET request, raising ConnectivityError if no response arrives."""
        pass

    def close(self):
        """Release transport resources (override if needed)."""
        pass


class AsyncTransport(ABC):
    """Abstract base class for asyncio HTTP transports."""

    @abstractmethod
    async def fetch(self, url: str, headers: Dict[str, str], timeout: float) -> HttpResponse:
        """Perform a GET request, raising ConnectivityError if no response arrives."""
        pass

    async def close(self):
        """Release transport resources (override if needed)."""
        pass
