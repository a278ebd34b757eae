"""
SpigotMC resource API.
"""

from typing import Any

from .base import BaseReleaseSource


class SpigotSource(BaseReleaseSource):
    """Reads ``current_version`` from a SpigotMC resource object."""

    name = "SpigotMC"
    URL_TEMPLATE = "https://api.spigotmc.org/simple/0.1/index.php?action=getResource&id=%s"

    def extract_latest(self, payload: Any) -> str:
        resource = self._require_object(payload)
        return self._require_string(resource, "current_version")
