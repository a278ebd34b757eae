"""
Release Checker - update checks against third-party release APIs.
"""

import logging

__version__ = "1.0.0"
__author__ = "Release Checker Team"
__email__ = "release-checker@example.com"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def get_info() -> dict:
    """Returns basic library information."""
    return {
        "name": "Release Checker",
        "version": __version__,
        "description": "Non-blocking update checks against SpigotMC, Modrinth and GitHub release APIs.",
        "author": __author__,
        "email": __email__,
    }


from .comparators import (DECIMAL_SCHEME, CallableComparator,
                          DecimalComparator, LexicalComparator,
                          SemanticComparator, as_comparator, get_comparator)
from .config import Config, CheckerConfig, LoggingConfig
from .core.exceptions import (ConnectivityError, MalformedResponseError,
                              ReleaseCheckError, UnsupportedVersionError)
from .core.interfaces import (AsyncTransport, ReleaseSource, Transport,
                              VersionComparator)
from .core.models import CheckOutcome, CheckResult, HttpResponse
from .sources import GitHubSource, ModrinthSource, Platform, SpigotSource
from .updates import AiohttpTransport, RequestsTransport, UpdateChecker

__all__ = [
    "__version__",
    "get_info",
    "VersionComparator",
    "ReleaseSource",
    "Transport",
    "AsyncTransport",
    "CheckOutcome",
    "CheckResult",
    "HttpResponse",
    "ReleaseCheckError",
    "ConnectivityError",
    "MalformedResponseError",
    "UnsupportedVersionError",
    "DECIMAL_SCHEME",
    "DecimalComparator",
    "SemanticComparator",
    "LexicalComparator",
    "CallableComparator",
    "get_comparator",
    "as_comparator",
    "Platform",
    "SpigotSource",
    "ModrinthSource",
    "GitHubSource",
    "UpdateChecker",
    "RequestsTransport",
    "AiohttpTransport",
    "Config",
    "CheckerConfig",
    "LoggingConfig",
]
