"""Shared test fixtures for the Kitsu client test suite."""

from __future__ import annotations

import os
from collections.abc import Callable

import httpx
import pytest

from kitsu.client import Client
from kitsu.config.settings import KitsuSettings

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Keep the developer's KITSU_* environment out of the tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_kitsu_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("KITSU_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> KitsuSettings:
    """Test settings with safe defaults."""
    return KitsuSettings(timeout_seconds=5.0, user_agent="kitsu-tests/1.0")


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_client() -> Callable[[Handler], Client]:
    """Build a Client whose transport answers every request with ``handler``."""

    def _make(handler: Handler) -> Client:
        return Client(httpx.Client(transport=httpx.MockTransport(handler)))

    return _make


@pytest.fixture
def client() -> Client:
    """A client for request-building tests; any request it sends fails the test."""

    def _no_network(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request: {request.method} {request.url}")

    return Client(httpx.Client(transport=httpx.MockTransport(_no_network)))
