"""
Redis-backed ring availability.
Implements RingProvider interface using Redis.

The hall layout comes from configuration. Which rings are occupied is
owned by another system, which keeps a Redis set of "<hall>:<ring>"
members. This provider only reads that set.

Failure handling:
  Redis errors are raised as RingProviderError. Unlike a cache, the
  occupied set is the only source of truth, so there is no fallback:
  answering "available" during an outage would hand out occupied rings.
"""

from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from app.core.logging import get_logger
from app.models.ring import Ring
from app.services.interfaces.ring_provider import (
    RingProvider,
    RingProviderError,
    iter_layout,
    parse_ring_key,
    ring_key,
)

logger = get_logger(__name__)


class RedisRingProvider(RingProvider):
    """
    Availability from a Redis set of occupied rings.

    Use when:
    - Several API instances share one occupancy state
    - Occupancy is written by a separate assignment service
    """

    def __init__(self, client: redis.Redis, hall_count: int, rings_per_hall: int, occupied_key: str):
        self.redis = client
        self.hall_count = hall_count
        self.rings_per_hall = rings_per_hall
        self.occupied_key = occupied_key

    def _in_layout(self, hall_number: int, ring_number: int) -> bool:
        return 1 <= hall_number <= self.hall_count and 1 <= ring_number <= self.rings_per_hall

    async def _occupied(self) -> set[tuple[int, int]]:
        try:
            members = await self.redis.smembers(self.occupied_key)
        except RedisError as e:
            logger.error("redis_occupied_read_failed", key=self.occupied_key, error=str(e))
            raise RingProviderError(f"Cannot read occupied rings: {e}") from e

        occupied = set()
        for member in members:
            if isinstance(member, bytes):
                member = member.decode("utf-8")
            try:
                occupied.add(parse_ring_key(member))
            except ValueError:
                logger.warning("ring_key_malformed", key=self.occupied_key, member=member)
        return occupied

    async def get_next_available_ring(self) -> Optional[Ring]:
        occupied = await self._occupied()
        for ring in iter_layout(self.hall_count, self.rings_per_hall):
            if (ring.hall_number, ring.number) not in occupied:
                return ring
        return None

    async def get_all_available_rings(self) -> list[Ring]:
        occupied = await self._occupied()
        return [
            ring for ring in iter_layout(self.hall_count, self.rings_per_hall)
            if (ring.hall_number, ring.number) not in occupied
        ]

    async def is_ring_available(self, hall_number: int, ring_number: int) -> bool:
        if not self._in_layout(hall_number, ring_number):
            return False

        member = ring_key(hall_number, ring_number)
        try:
            occupied = await self.redis.sismember(self.occupied_key, member)
        except RedisError as e:
            logger.error("redis_availability_check_failed", key=self.occupied_key, member=member, error=str(e))
            raise RingProviderError(f"Cannot check ring {member}: {e}") from e
        return not occupied
