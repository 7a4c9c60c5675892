"""Shared test fixtures for the RAWG client test suite."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from rawgapi.config.settings import RawgSettings
from rawgapi.service import RawgService, create_service
from tests.helpers import TEST_API_KEY, RecordingTransport


# ---------------------------------------------------------------------------
# Ensure required env vars are set for RawgSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so RawgSettings can be instantiated in tests."""
    monkeypatch.setenv("RAWG_API_KEY", TEST_API_KEY)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> RawgSettings:
    """Test settings with safe defaults."""
    return RawgSettings(
        api_key=TEST_API_KEY,
        log_json=False,
        fetch_on_startup=False,
        max_connections=5,
        max_keepalive_connections=2,
    )


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_service() -> Callable[..., tuple[RawgService, RecordingTransport]]:
    """Build a service whose HTTP traffic is answered by *handler*."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        return create_service(TEST_API_KEY, transport=transport), transport

    return _make
