"""Shared test fixtures for Schlep SDK tests.

HTTP goes through ``httpx.MockTransport``; WebSocket streams through fake
connection objects. No network calls.  All tests are fast (<1s).
"""

from __future__ import annotations

import pytest

from schlep_sdk import AsyncSchlepClient, SchlepClient
from sdk_fakes import API_KEY, BASE_URL, MockApi


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()


@pytest.fixture
def client(mock_api):
    """Sync client wired to the mock API."""
    c = SchlepClient(API_KEY, base_url=BASE_URL, transport=mock_api.transport())
    yield c
    c.close()


@pytest.fixture
def async_client(mock_api):
    """Async client wired to the mock API; tests close it themselves."""
    return AsyncSchlepClient(API_KEY, base_url=BASE_URL, transport=mock_api.transport())
