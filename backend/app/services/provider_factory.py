"""
Ring provider factory.
Configures which availability provider the API uses.
"""

from typing import Optional

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.infrastructure.redis_client import get_redis, close_redis
from app.services.interfaces.ring_provider import RingProvider
from app.services.interfaces.memory_ring_provider import InMemoryRingProvider
from app.services.availability_service import RedisRingProvider

logger = get_logger(__name__)


def create_ring_provider(settings: Settings) -> RingProvider:
    """
    Build the configured ring provider.

    Selected by the RING_PROVIDER setting:
    - memory: InMemoryRingProvider (development, tests)
    - redis: RedisRingProvider (shared occupancy)
    """
    if settings.RING_PROVIDER == "memory":
        return InMemoryRingProvider(
            hall_count=settings.HALL_COUNT,
            rings_per_hall=settings.RINGS_PER_HALL,
            occupied=settings.OCCUPIED_RINGS,
        )
    if settings.RING_PROVIDER == "redis":
        return RedisRingProvider(
            get_redis(),
            hall_count=settings.HALL_COUNT,
            rings_per_hall=settings.RINGS_PER_HALL,
            occupied_key=settings.RING_OCCUPIED_KEY,
        )
    raise ValueError(f"Unknown ring provider: {settings.RING_PROVIDER!r}")


# Singleton instance
_provider: Optional[RingProvider] = None


def get_ring_provider() -> RingProvider:
    """Get ring provider singleton. Used as a FastAPI dependency."""
    global _provider
    if _provider is None:
        settings = get_settings()
        _provider = create_ring_provider(settings)
        logger.info("ring_provider_created", provider=settings.RING_PROVIDER)
    return _provider


async def close_ring_provider() -> None:
    """Drop the provider and release its connections on shutdown."""
    global _provider
    if isinstance(_provider, RedisRingProvider):
        await close_redis()
    _provider = None
