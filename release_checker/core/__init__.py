"""
Core abstractions and data models for update checks.
"""

from .exceptions import (ConnectivityError, MalformedResponseError,
                         ReleaseCheckError, UnsupportedVersionError)
from .interfaces import AsyncTransport, ReleaseSource, Transport, VersionComparator
from .models import CheckOutcome, CheckResult, HttpResponse

__all__ = [
    "ReleaseCheckError", "ConnectivityError", "MalformedResponseError", "UnsupportedVersionError",
    "VersionComparator", "ReleaseSource", "Transport", "AsyncTransport",
    "CheckOutcome", "CheckResult", "HttpResponse",
]
