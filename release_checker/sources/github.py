"""
GitHub Releases API.
"""

from typing import Any

from .base import BaseReleaseSource


class GitHubSource(BaseReleaseSource):
    """Reads ``tag_name`` from the latest GitHub release. Source ids are ``owner/repo``."""

    name = "GitHub"
    URL_TEMPLATE = "https://api.github.com/repos/%s/releases/latest"

    def extract_latest(self, payload: Any) -> str:
        release = self._require_object(payload)
        return self._require_string(release, "tag_name")
