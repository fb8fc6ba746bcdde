"""
Pytest fixtures for backend tests.
"""

import os

# Must be set before contentcoin.config is imported
os.environ["RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["RESOLVE_DNS"] = "false"

import pytest
from fastapi.testclient import TestClient

from contentcoin.config import state
from contentcoin.fetcher import BROWSER_PROFILE, FetchProfile
from contentcoin.server import app
from contentcoin.storage import MemStorage


class FakeFetcher:
    """Stands in for PageFetcher: returns canned HTML or raises a canned error."""

    def __init__(self, html: str = "", error: Exception | None = None):
        self.html = html
        self.error = error
        self.calls: list[tuple[str, FetchProfile]] = []

    async def fetch(self, url: str, profile: FetchProfile = BROWSER_PROFILE) -> str:
        self.calls.append((url, profile))
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture
def fake_fetcher():
    """Fetcher returning an empty page; set .html or .error per test."""
    return FakeFetcher()


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def client(storage, fake_fetcher):
    """Create a test client with isolated storage and a fake fetcher."""
    original_storage = state.storage
    original_fetcher = state.fetcher

    state.storage = storage
    state.fetcher = fake_fetcher

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    state.storage = original_storage
    state.fetcher = original_fetcher
