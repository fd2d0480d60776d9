"""Tests for in-flight request accounting during shutdown."""

import asyncio
import contextlib

import pytest

from src.tracker.core.shutdown import RequestTracker

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]


async def _hold(tracker: RequestTracker, seconds: float) -> None:
    async with tracker.track_request():
        await asyncio.sleep(seconds)


class TestRequestTracker:
    async def test_counts_requests(self):
        tracker = RequestTracker()

        async with tracker.track_request():
            assert tracker.in_flight_count == 1
            async with tracker.track_request():
                assert tracker.in_flight_count == 2

        assert tracker.in_flight_count == 0
        assert not tracker.is_shutting_down

    async def test_count_drops_when_request_fails(self):
        tracker = RequestTracker()

        with pytest.raises(RuntimeError):
            async with tracker.track_request():
                raise RuntimeError("handler failed")

        assert tracker.in_flight_count == 0

    async def test_idle_shutdown_drains_immediately(self):
        tracker = RequestTracker()

        tracker.start_shutdown()

        assert tracker.is_shutting_down
        assert await tracker.wait_for_drain(timeout=0.5) is True

    async def test_shutdown_waits_for_in_flight(self):
        tracker = RequestTracker()
        tasks = [asyncio.create_task(_hold(tracker, d)) for d in (0.05, 0.1, 0.15)]
        await asyncio.sleep(0.01)
        assert tracker.in_flight_count == 3

        tracker.start_shutdown()

        assert await tracker.wait_for_drain(timeout=1.0) is True
        assert tracker.in_flight_count == 0
        await asyncio.gather(*tasks)

    async def test_drain_times_out(self):
        tracker = RequestTracker()
        task = asyncio.create_task(_hold(tracker, 5.0))
        await asyncio.sleep(0.01)

        tracker.start_shutdown()

        assert await tracker.wait_for_drain(timeout=0.05) is False
        assert tracker.in_flight_count == 1

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def test_reset_clears_shutdown(self):
        tracker = RequestTracker()
        tracker.start_shutdown()

        tracker.reset()

        assert not tracker.is_shutting_down
        assert await tracker.wait_for_drain(timeout=0.05) is False
