"""Tests for the bounded credential channel."""

import asyncio

import pytest

from clawbrute.engine import STOP, BoundedChannel, Credentials
from clawbrute.errors import ConfigurationError


class TestBoundedChannel:
    """Test put/take/close behavior."""

    def test_capacity_must_be_positive(self):
        with pytest.raises(ConfigurationError, match="capacity"):
            BoundedChannel(0)

    @pytest.mark.asyncio
    async def test_fifo_order(self):
        channel = BoundedChannel(3)
        pairs = [Credentials("a", "1"), Credentials("a", "2"), Credentials("b", "1")]
        for pair in pairs:
            assert await channel.put(pair) is True

        assert [await channel.take() for _ in pairs] == pairs

    @pytest.mark.asyncio
    async def test_put_blocks_when_full(self):
        channel = BoundedChannel(1)
        await channel.put(Credentials("a", "1"))

        pending = asyncio.create_task(channel.put(Credentials("a", "2")))
        await asyncio.sleep(0.01)
        assert not pending.done()

        assert await channel.take() == Credentials("a", "1")
        assert await asyncio.wait_for(pending, timeout=1) is True
        assert await channel.take() == Credentials("a", "2")

    @pytest.mark.asyncio
    async def test_cancel_wakes_blocked_put(self):
        channel = BoundedChannel(1)
        await channel.put(Credentials("a", "1"))
        pending = asyncio.create_task(channel.put(Credentials("a", "2")))
        await asyncio.sleep(0.01)

        channel.cancel()

        assert await asyncio.wait_for(pending, timeout=1) is False
        assert channel.qsize() == 1

    @pytest.mark.asyncio
    async def test_cancel_wakes_blocked_take(self):
        channel = BoundedChannel(2)
        takers = [asyncio.create_task(channel.take()) for _ in range(3)]
        await asyncio.sleep(0.01)
        assert not any(task.done() for task in takers)

        channel.cancel()

        results = await asyncio.wait_for(asyncio.gather(*takers), timeout=1)
        assert results == [STOP, STOP, STOP]

    @pytest.mark.asyncio
    async def test_take_after_cancel_returns_stop_even_with_items(self):
        channel = BoundedChannel(2)
        await channel.put(Credentials("a", "1"))
        channel.cancel()

        assert await channel.take() is STOP
        assert await channel.put(Credentials("a", "2")) is False

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self):
        channel = BoundedChannel(1)
        channel.cancel()
        channel.cancel()
        assert channel.cancelled is True

    @pytest.mark.asyncio
    async def test_close_sends_one_stop_per_worker(self):
        channel = BoundedChannel(4)
        await channel.put(Credentials("a", "1"))

        closing = asyncio.create_task(channel.close(4))
        items = [await channel.take() for _ in range(5)]
        await asyncio.wait_for(closing, timeout=1)

        assert items[0] == Credentials("a", "1")
        assert items[1:] == [STOP] * 4
        assert channel.qsize() == 0

    @pytest.mark.asyncio
    async def test_close_after_cancel_discards_credentials(self):
        channel = BoundedChannel(3)
        for password in ("1", "2", "3"):
            await channel.put(Credentials("a", password))
        channel.cancel()

        await asyncio.wait_for(channel.close(3), timeout=1)

        assert channel.qsize() == 3
        drained = [channel._queue.get_nowait() for _ in range(3)]
        assert drained == [STOP, STOP, STOP]

    @pytest.mark.asyncio
    async def test_close_cancelled_midway_keeps_sentinel_count(self):
        channel = BoundedChannel(2)
        await channel.put(Credentials("a", "1"))
        closing = asyncio.create_task(channel.close(2))
        await asyncio.sleep(0.01)

        # One STOP fits, the second blocks until cancellation.
        channel.cancel()
        await asyncio.wait_for(closing, timeout=1)

        drained = [channel._queue.get_nowait() for _ in range(channel.qsize())]
        assert drained == [STOP, STOP]
