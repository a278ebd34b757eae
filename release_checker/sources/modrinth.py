"""
Modrinth project version API.
"""

from typing import Any

from ..core.exceptions import MalformedResponseError
from .base import BaseReleaseSource


class ModrinthSource(BaseReleaseSource):
    """Reads ``version_number`` from the newest entry of a Modrinth version list."""

    name = "Modrinth"
    URL_TEMPLATE = "https://api.modrinth.com/v2/project/%s/version"

    def extract_latest(self, payload: Any) -> str:
        versions = self._require_array(payload)
        if not versions:
            raise MalformedResponseError("Modrinth returned no versions for this project")
        # Modrinth lists versions newest first
        newest = self._require_object(versions[0])
        return self._require_string(newest, "version_number")
