"""
Tests for the Redis-backed provider.
The Redis client is replaced by an AsyncMock.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.models.ring import Ring
from app.services.availability_service import RedisRingProvider
from app.services.interfaces.ring_provider import RingProviderError

OCCUPIED_KEY = "rings:occupied"


def make_provider(client, hall_count=2, rings_per_hall=2):
    return RedisRingProvider(client, hall_count=hall_count, rings_per_hall=rings_per_hall, occupied_key=OCCUPIED_KEY)


@pytest.mark.asyncio
async def test_next_ring_skips_occupied():
    client = AsyncMock()
    client.smembers.return_value = {"1:1", "1:2"}

    ring = await make_provider(client).get_next_available_ring()

    assert ring == Ring(hall_number=2, number=1)
    client.smembers.assert_awaited_once_with(OCCUPIED_KEY)


@pytest.mark.asyncio
async def test_next_ring_none_when_all_occupied():
    client = AsyncMock()
    client.smembers.return_value = {"1:1", "1:2", "2:1", "2:2"}

    assert await make_provider(client).get_next_available_ring() is None


@pytest.mark.asyncio
async def test_all_rings_accepts_bytes_and_skips_malformed():
    client = AsyncMock()
    client.smembers.return_value = {b"2:1", "garbage"}

    rings = await make_provider(client).get_all_available_rings()

    assert rings == [
        Ring(hall_number=1, number=1),
        Ring(hall_number=1, number=2),
        Ring(hall_number=2, number=2),
    ]


@pytest.mark.asyncio
async def test_is_ring_available_checks_membership():
    client = AsyncMock()
    client.sismember.return_value = 1
    provider = make_provider(client)

    assert await provider.is_ring_available(2, 1) is False
    client.sismember.assert_awaited_once_with(OCCUPIED_KEY, "2:1")

    client.sismember.return_value = 0
    assert await provider.is_ring_available(1, 2) is True


@pytest.mark.asyncio
async def test_is_ring_available_outside_layout_skips_redis():
    client = AsyncMock()

    assert await make_provider(client).is_ring_available(5, 1) is False
    client.sismember.assert_not_awaited()


@pytest.mark.asyncio
async def test_redis_failure_raises_provider_error():
    client = AsyncMock()
    client.smembers.side_effect = RedisConnectionError("connection refused")
    client.sismember.side_effect = RedisConnectionError("connection refused")
    provider = make_provider(client)

    with pytest.raises(RingProviderError):
        await provider.get_next_available_ring()
    with pytest.raises(RingProviderError):
        await provider.get_all_available_rings()
    with pytest.raises(RingProviderError):
        await provider.is_ring_available(1, 1)
