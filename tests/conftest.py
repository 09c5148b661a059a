"""
Test configuration and fixtures for the FastAPI application.

This module provides:
- Test settings and a controllable host clock
- A world clock context built from fakes (no network, no real clock)
- FastAPI test client setup over ASGITransport
"""

# Standard library
from typing import Any, AsyncGenerator, List

import pytest
import pytest_asyncio

# Third-party packages
from httpx import ASGITransport, AsyncClient

# Local application imports
from main import create_app
from shared.core import config
from tests.test_config import AppTestSettings, get_test_settings
from tests.utils.fakes import (
    CityFactory,
    FakeLocalClock,
    FakeReferenceProvider,
    utc_millis,
)
from world_clock_service.data.catalog import load_catalog
from world_clock_service.schemas.city import City
from world_clock_service.services.context import (
    WorldClockContext,
    build_context,
)

# 2024-06-15 12:00:00 UTC, a Saturday
FIXED_NOW = utc_millis(2024, 6, 15, 12)


@pytest.fixture(scope="session", autouse=True)
def override_global_settings():
    """Force override the global settings at the
    beginning of the test session."""
    config.get_settings.cache_clear()
    config.settings = get_test_settings()


@pytest.fixture
def test_settings() -> AppTestSettings:
    """Provide test settings."""
    return get_test_settings()


@pytest.fixture
def fixed_now() -> int:
    return FIXED_NOW


@pytest.fixture
def local_clock() -> FakeLocalClock:
    return FakeLocalClock(FIXED_NOW)


@pytest.fixture
def reference_provider(local_clock: FakeLocalClock) -> FakeReferenceProvider:
    """Reference 400ms ahead of the host once latency is accounted for."""
    sent_at = FIXED_NOW
    received_at = FIXED_NOW + 200
    # server + rtt/2 - received_at = 400
    reference = received_at + 400 - (received_at - sent_at) // 2
    return FakeReferenceProvider(local_clock, reference, received_at)


@pytest.fixture
def cities() -> List[City]:
    return load_catalog()


@pytest.fixture
def sample_cities() -> List[City]:
    return CityFactory.create_cities(
        "Asia/Tokyo", "America/New_York", "Asia/Kolkata", "Europe/London"
    )


@pytest.fixture
def world_clock(
    test_settings: AppTestSettings,
    local_clock: FakeLocalClock,
    reference_provider: FakeReferenceProvider,
    cities: List[City],
) -> WorldClockContext:
    return build_context(
        test_settings,
        provider=reference_provider,
        local_clock=local_clock,
        cities=cities,
    )


@pytest_asyncio.fixture(scope="function")
async def test_app(
    test_settings: AppTestSettings, world_clock: WorldClockContext
) -> AsyncGenerator[Any, None]:
    """Create a test FastAPI application around the fake context."""
    app = create_app(app_settings=test_settings, context=world_clock)
    yield app
    await world_clock.ticker.stop()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client with proper async support."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://testserver", timeout=30.0
    ) as client:
        yield client
