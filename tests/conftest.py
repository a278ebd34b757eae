"""
Pytest configuration and fixtures for release checker tests.
"""

import json
import shutil
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from release_checker.core.models import HttpResponse
from release_checker.updates.checker import UpdateChecker


@pytest.fixture
def make_response():
    """Build an HttpResponse from JSON-serializable data or raw bytes."""

    def _make(data=None, status=200, raw=None):
        body = raw if raw is not None else json.dumps(data).encode("utf-8")
        return HttpResponse(status=status, body=body)

    return _make


@pytest.fixture
def mock_transport():
    """Create a mock blocking transport."""
    transport = Mock()
    transport.fetch = Mock()
    transport.close = Mock()
    return transport


@pytest.fixture
def mock_async_transport():
    """Create a mock asyncio transport."""
    transport = Mock()
    transport.fetch = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def checker_factory(mock_transport, mock_async_transport):
    """Create UpdateCheckers wired to the mock transports, shut down after the test."""
    created = []

    def _factory(local_version="1.0.0", **kwargs):
        kwargs.setdefault("transport", mock_transport)
        kwargs.setdefault("async_transport", mock_async_transport)
        checker = UpdateChecker(local_version, **kwargs)
        created.append(checker)
        return checker

    yield _factory

    for checker in created:
        checker.shutdown()


@pytest.fixture
def temp_directory():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Clean environment variables for each test."""
    env_vars_to_remove = [
        'RELEASE_CHECKER_CONFIG',
        'DEBUG',
        'LOG_LEVEL'
    ]

    for var in env_vars_to_remove:
        monkeypatch.delenv(var, raising=False)


class AsyncContextManager:
    """Helper class for async context manager testing."""

    def __init__(self, return_value):
        self.return_value = return_value

    async def __aenter__(self):
        return self.return_value

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


@pytest.fixture
def mock_aiohttp_session():
    """Create a mock aiohttp session; call ``session.respond(...)`` to change the reply."""
    session = Mock()
    session.closed = False
    session.close = AsyncMock()

    def respond(status=200, body=b"{}"):
        response = Mock()
        response.status = status
        response.read = AsyncMock(return_value=body)
        session.get = Mock(return_value=AsyncContextManager(response))
        return response

    session.respond = respond
    respond()
    return session


# Pytest markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "network: marks tests that require network access")
