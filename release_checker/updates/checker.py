"""
Update checking against third-party release APIs.
"""

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from importlib import metadata
from typing import Any, Awaitable, Dict, Optional, Tuple, Union

from ..comparators import as_comparator
from ..config import CheckerConfig
from ..core.exceptions import (ConnectivityError, MalformedResponseError,
                               UnsupportedVersionError)
from ..core.interfaces import (AsyncTransport, ReleaseSource, Transport,
                               VersionComparator)
from ..core.models import CheckOutcome, CheckResult
from ..sources import Platform
from ..utils.logging import get_logger
from ..utils.validators import SourceIdValidator, VersionStringValidator
from .transport import AiohttpTransport, RequestsTransport

SourceLike = Union[ReleaseSource, Platform]


class UpdateChecker:
    """
    Checks a release API for a version newer than the locally installed one.

    Every check resolves to a CheckResult carrying exactly one CheckOutcome.
    Network, parsing, extraction and comparison failures are reported through
    the result; only argument misuse raises, and it does so before any work
    is scheduled.
    """

    def __init__(
        self,
        local_version: str,
        comparator: Any = None,
        config: Optional[CheckerConfig] = None,
        transport: Optional[Transport] = None,
        async_transport: Optional[AsyncTransport] = None,
        executor: Optional[Executor] = None,
    ):
        self.local_version = VersionStringValidator().require(local_version)
        self.config = config or CheckerConfig()
        self.comparator: VersionComparator = as_comparator(
            comparator if comparator is not None else self.config.comparator)
        self.transport = transport or RequestsTransport()
        self.async_transport = async_transport or AiohttpTransport()
        self._executor = executor
        self._owns_executor = executor is None
        self._executor_lock = threading.Lock()
        self._id_validator = SourceIdValidator()
        self.logger = get_logger(__name__)

    @classmethod
    def for_distribution(cls, distribution: str, comparator: Any = None, **kwargs) -> "UpdateChecker":
        """Create a checker for an installed distribution, reading its version from metadata."""
        return cls(metadata.version(distribution), comparator=comparator, **kwargs)

    # --- Public API ---

    def check(self, source_id: Union[str, int], source: SourceLike) -> "Future[CheckResult]":
        """Schedule a check on the worker pool and return a future for its result."""
        source_id, release_source = self._prepare(source_id, source)
        return self._get_executor().submit(self._run_check, source_id, release_source)

    def check_blocking(self, source_id: Union[str, int], source: SourceLike) -> CheckResult:
        """Run a check in the calling thread."""
        source_id, release_source = self._prepare(source_id, source)
        return self._run_check(source_id, release_source)

    def check_async(self, source_id: Union[str, int], source: SourceLike) -> Awaitable[CheckResult]:
        """Return an awaitable check that fetches through the async transport."""
        source_id, release_source = self._prepare(source_id, source)
        return self._run_check_async(source_id, release_source)

    def shutdown(self, wait: bool = True):
        """Stop the worker pool (if this checker created it) and close the transport."""
        with self._executor_lock:
            executor = self._executor if self._owns_executor else None
            if executor is not None:
                self._executor = None
        if executor is not None:
            executor.shutdown(wait=wait)
        self.transport.close()

    async def aclose(self):
        """Close the async transport's session."""
        await self.async_transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        self.shutdown(wait=False)
        return False

    # --- Pipeline ---

    def _prepare(self, source_id: Union[str, int], source: SourceLike) -> Tuple[str, ReleaseSource]:
        if isinstance(source_id, int) and not isinstance(source_id, bool):
            source_id = str(source_id)
        self._id_validator.require(source_id)

        if source is None:
            raise TypeError("A release source must be provided")
        if isinstance(source, Platform):
            source = source.source
        elif not isinstance(source, ReleaseSource):
            raise TypeError(f"Expected a ReleaseSource or Platform, got {type(source).__name__}")
        return source_id, source

    def _headers(self) -> Dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    def _run_check(self, source_id: str, source: ReleaseSource) -> CheckResult:
        url = source.build_url(source_id)
        self.logger.info(
            f"Checking {source.name} for updates at {url} (local version: {self.local_version})...")

        status = None
        try:
            response = self.transport.fetch(url, self._headers(), self.config.request_timeout)
            status = response.status
            payload = response.json()
        except (ConnectivityError, OSError) as e:
            return self._conclude_fault(source, status, e)

        return self._conclude(source, payload)

    async def _run_check_async(self, source_id: str, source: ReleaseSource) -> CheckResult:
        url = source.build_url(source_id)
        self.logger.info(
            f"Checking {source.name} for updates at {url} (local version: {self.local_version})...")

        status = None
        try:
            response = await self.async_transport.fetch(url, self._headers(), self.config.request_timeout)
            status = response.status
            payload = response.json()
        except (ConnectivityError, OSError) as e:
            return self._conclude_fault(source, status, e)

        return self._conclude(source, payload)

    def _conclude(self, source: ReleaseSource, payload: Any) -> CheckResult:
        try:
            fetched = source.extract_latest(payload)
        except (MalformedResponseError, LookupError, TypeError, AttributeError) as e:
            self.logger.warning(f"{source.name} response had no usable version: {e}")
            return self._result(CheckOutcome.MALFORMED_RESPONSE)

        outcome = self._classify(fetched)
        self.logger.info(
            f"{source.name}: {outcome.display_name} (local {self.local_version}, remote {fetched})")
        return self._result(outcome, fetched)

    def _classify(self, fetched: str) -> CheckOutcome:
        try:
            latest = self.comparator.compare(self.local_version, fetched)
        except UnsupportedVersionError:
            latest = None

        if latest is None:
            return CheckOutcome.COMPARISON_UNSUPPORTED
        if latest == self.local_version:
            if fetched == self.local_version:
                return CheckOutcome.UP_TO_DATE
            return CheckOutcome.AHEAD_OF_REMOTE
        if latest == fetched:
            return CheckOutcome.NEW_UPDATE_AVAILABLE

        self.logger.warning(
            f"{self.comparator!r} returned '{latest}', which is neither '{self.local_version}' nor '{fetched}'")
        return CheckOutcome.COMPARISON_UNSUPPORTED

    def _conclude_fault(self, source: ReleaseSource, status: Optional[int], fault: BaseException) -> CheckResult:
        outcome = self._outcome_for_status(status)
        self.logger.error(f"{source.name} update check failed ({outcome.display_name}): {fault}")
        return self._result(outcome, fault=fault)

    @staticmethod
    def _outcome_for_status(status: Optional[int]) -> CheckOutcome:
        if status is None:
            return CheckOutcome.UNKNOWN_ERROR
        if status == 401:
            return CheckOutcome.UNAUTHORIZED
        return CheckOutcome.CONNECTION_FAILED

    def _result(self, outcome: CheckOutcome, fetched: str = "",
                fault: Optional[BaseException] = None) -> CheckResult:
        return CheckResult(outcome=outcome, local_version=self.local_version,
                           fetched_version=fetched, fault=fault)

    def _get_executor(self) -> Executor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.config.max_workers, thread_name_prefix="release-check")
                self._owns_executor = True
            return self._executor
