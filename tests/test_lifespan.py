from typing import List

import pytest

from lifespan import lifespan, synchronize_reference_clock
from main import create_app
from world_clock_service.schemas.city import City
from world_clock_service.services.context import build_context
from tests.test_config import AppTestSettings
from tests.utils.fakes import (
    FailingReferenceProvider,
    FakeLocalClock,
    FakeReferenceProvider,
)


def make_context(settings, provider, clock, cities):
    return build_context(
        settings, provider=provider, local_clock=clock, cities=cities
    )


class TestStartupSynchronization:
    """Test cases for the startup retry policy."""

    @pytest.mark.asyncio
    async def test_retries_until_success(
        self,
        test_settings: AppTestSettings,
        local_clock: FakeLocalClock,
        sample_cities: List[City],
        fixed_now: int,
    ):
        provider = FakeReferenceProvider(
            local_clock, fixed_now + 1500, received_at=fixed_now, failures=2
        )
        context = make_context(
            test_settings, provider, local_clock, sample_cities
        )

        assert await synchronize_reference_clock(context) is True
        assert provider.calls == 3
        assert context.clock_state.offset_millis == 1500

    @pytest.mark.asyncio
    async def test_gives_up_after_configured_attempts(
        self,
        test_settings: AppTestSettings,
        local_clock: FakeLocalClock,
        sample_cities: List[City],
        fixed_now: int,
    ):
        provider = FailingReferenceProvider()
        context = make_context(
            test_settings, provider, local_clock, sample_cities
        )

        assert await synchronize_reference_clock(context) is False
        assert provider.calls == test_settings.REFERENCE_SYNC_ATTEMPTS
        assert context.synchronizer.is_synchronized() is False
        assert context.now() == fixed_now

    @pytest.mark.asyncio
    async def test_without_reference_url(
        self,
        test_settings: AppTestSettings,
        local_clock: FakeLocalClock,
        sample_cities: List[City],
    ):
        context = make_context(test_settings, None, local_clock, sample_cities)

        assert context.synchronizer.provider is None
        assert await synchronize_reference_clock(context) is False


class TestLifespan:
    """Test cases for application startup and shutdown."""

    @pytest.mark.asyncio
    async def test_syncs_ticks_and_stops(
        self,
        test_settings: AppTestSettings,
        local_clock: FakeLocalClock,
        reference_provider: FakeReferenceProvider,
        sample_cities: List[City],
    ):
        context = make_context(
            test_settings, reference_provider, local_clock, sample_cities
        )
        app = create_app(app_settings=test_settings, context=context)

        async with lifespan(app):
            assert context.synchronizer.is_synchronized() is True
            assert context.clock_state.offset_millis == 400
            assert context.board.tick_count == 1
            assert context.ticker.running is True

        assert context.ticker.running is False
