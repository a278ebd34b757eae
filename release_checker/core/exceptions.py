"""Exceptions raised while fetching and interpreting release data."""

from typing import Optional


class ReleaseCheckError(Exception):
    """Base class for update check failures."""
    pass


class ConnectivityError(ReleaseCheckError):
    """The release API could not be reached or its body could not be read."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class MalformedResponseError(ReleaseCheckError, ValueError):
    """The response was parsed but did not have the expected shape."""
    pass


class UnsupportedVersionError(ReleaseCheckError, ValueError):
    """Two version strings cannot be compared under the active scheme."""
    pass
