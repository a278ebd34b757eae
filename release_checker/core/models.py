"""Data models for update checks."""

import json
from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .exceptions import ConnectivityError


class CheckOutcome(Enum):
    """Terminal classification of an update check."""
    NEW_UPDATE_AVAILABLE = "new_update_available"
    CONNECTION_FAILED = "connection_failed"
    MALFORMED_RESPONSE = "malformed_response"
    UNAUTHORIZED = "unauthorized"
    AHEAD_OF_REMOTE = "ahead_of_remote"
    UNKNOWN_ERROR = "unknown_error"
    COMPARISON_UNSUPPORTED = "comparison_unsupported"
    UP_TO_DATE = "up_to_date"

    @property
    def display_name(self) -> str:
        """Get a user-friendly display name for the outcome."""
        outcome_map = {
            CheckOutcome.NEW_UPDATE_AVAILABLE: "New update available",
            CheckOutcome.CONNECTION_FAILED: "Could not connect",
            CheckOutcome.MALFORMED_RESPONSE: "Malformed response",
            CheckOutcome.UNAUTHORIZED: "Unauthorized query",
            CheckOutcome.AHEAD_OF_REMOTE: "Ahead of remote release",
            CheckOutcome.UNKNOWN_ERROR: "Unknown error",
            CheckOutcome.COMPARISON_UNSUPPORTED: "Unsupported version scheme",
            CheckOutcome.UP_TO_DATE: "Up to date",
        }
        return outcome_map.get(self, self.value.replace("_", " ").capitalize())

    @property
    def is_error(self) -> bool:
        """Check if the outcome means the check itself failed."""
        return self in [
            CheckOutcome.CONNECTION_FAILED,
            CheckOutcome.MALFORMED_RESPONSE,
            CheckOutcome.UNAUTHORIZED,
            CheckOutcome.UNKNOWN_ERROR,
            CheckOutcome.COMPARISON_UNSUPPORTED,
        ]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one update check against a release API."""
    outcome: CheckOutcome
    local_version: str
    fetched_version: str = ""  # Empty when no version could be extracted
    fault: Optional[BaseException] = None

    @property
    def is_update_available(self) -> bool:
        return self.outcome == CheckOutcome.NEW_UPDATE_AVAILABLE

    @property
    def latest_known_version(self) -> str:
        """The fetched version if an update is available, else the local one."""
        return self.fetched_version if self.is_update_available else self.local_version

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "local_version": self.local_version,
            "fetched_version": self.fetched_version,
            "latest_known_version": self.latest_known_version,
            "fault": str(self.fault) if self.fault is not None else None,
        }


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body returned by a transport."""
    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def raise_for_status(self):
        if not self.ok:
            raise ConnectivityError(f"Release API responded with HTTP {self.status}", status=self.status)

    def json(self) -> Any:
        """Parse the body as JSON, raising ConnectivityError on a bad status or syntax."""
        self.raise_for_status()
        try:
            # Decimal keeps the literal text of numbers such as 1.10
            return json.loads(self.body.decode("utf-8"), parse_float=Decimal)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConnectivityError(f"Release API returned an unreadable body: {e}", status=self.status) from e
