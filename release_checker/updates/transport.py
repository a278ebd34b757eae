"""
HTTP transports used to reach release APIs.
"""

import asyncio
from typing import Dict, Optional

import aiohttp
import requests

from ..core.exceptions import ConnectivityError
from ..core.interfaces import AsyncTransport, Transport
from ..core.models import HttpResponse
from ..utils.logging import get_logger


class RequestsTransport(Transport):
    """Blocking transport built on ``requests``. Safe to call from worker threads."""

    def __init__(self, session: Optional[requests.Session] = None):
        # Without an injected session every fetch uses its own connection.
        self.session = session
        self.logger = get_logger(__name__)

    def fetch(self, url: str, headers: Dict[str, str], timeout: float) -> HttpResponse:
        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(url, headers=headers, timeout=timeout)
            return HttpResponse(status=response.status_code, body=response.content)
        except requests.exceptions.Timeout as e:
            self.logger.warning(f"Timeout fetching {url}")
            raise ConnectivityError(f"Timed out after {timeout}s: {url}") from e
        except requests.RequestException as e:
            self.logger.warning(f"Network error fetching {url}: {e}")
            raise ConnectivityError(f"Could not reach {url}: {e}") from e

    def close(self):
        if self.session is not None:
            self.session.close()


class AiohttpTransport(AsyncTransport):
    """asyncio transport built on ``aiohttp``, sharing one lazily created session."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        # Loop the owned session was created on; None for an injected session
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None
        self.logger = get_logger(__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create an aiohttp ClientSession bound to the running loop."""
        loop = asyncio.get_running_loop()
        if self._session is not None and self._session_loop is not None and self._session_loop is not loop:
            # A session cannot outlive its loop, e.g. across separate asyncio.run() calls
            self.logger.debug("Event loop changed, discarding the previous aiohttp session")
            self._session = None
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._session_loop = loop
        return self._session

    async def fetch(self, url: str, headers: Dict[str, str], timeout: float) -> HttpResponse:
        try:
            session = await self._get_session()
            async with session.get(url, headers=headers,
                                   timeout=aiohttp.ClientTimeout(total=timeout)) as response:
                body = await response.read()
                return HttpResponse(status=response.status, body=body)
        except asyncio.TimeoutError as e:
            self.logger.warning(f"Timeout fetching {url}")
            raise ConnectivityError(f"Timed out after {timeout}s: {url}") from e
        except aiohttp.ClientError as e:
            self.logger.warning(f"Client error fetching {url}: {e}")
            raise ConnectivityError(f"Could not reach {url}: {e}") from e

    async def close(self):
        stale = self._session_loop is not None and self._session_loop is not asyncio.get_running_loop()
        if self._session is not None and not self._session.closed and not stale:
            await self._session.close()
        self._session = None
        self._session_loop = None
