"""
Ring availability provider interface.
Allows swapping where availability comes from without changing the API layer.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from app.models.ring import Ring


class RingProviderError(Exception):
    """Raised when a provider cannot answer an availability query."""


def ring_key(hall_number: int, ring_number: int) -> str:
    return f"{hall_number}:{ring_number}"


def parse_ring_key(key: str) -> tuple[int, int]:
    """Parse a "<hall>:<ring>" key into a (hall_number, ring_number) pair."""
    hall, sep, number = key.strip().partition(":")
    if not sep:
        raise ValueError(f"Invalid ring key {key!r}, expected '<hall>:<ring>'")
    try:
        return int(hall), int(number)
    except ValueError:
        raise ValueError(f"Invalid ring key {key!r}, expected '<hall>:<ring>'") from None


def iter_layout(hall_count: int, rings_per_hall: int) -> Iterator[Ring]:
    """Yield every ring of the layout ordered by (hall_number, number)."""
    for hall_number in range(1, hall_count + 1):
        for number in range(1, rings_per_hall + 1):
            yield Ring(hall_number=hall_number, number=number)


class RingProvider(ABC):
    """
    Interface for ring availability providers.

    Implementations:
    - InMemoryRingProvider: fixed layout with a static occupied set
    - RedisRingProvider: fixed layout, occupied set read from Redis
    """

    @abstractmethod
    async def get_next_available_ring(self) -> Optional[Ring]:
        """
        Get the next available ring.

        Returns:
            The ring, or None when no ring is available
        """
        pass

    @abstractmethod
    async def get_all_available_rings(self) -> list[Ring]:
        """Get every currently available ring, possibly none."""
        pass

    @abstractmethod
    async def is_ring_available(self, hall_number: int, ring_number: int) -> bool:
        """
        Check whether one ring is available.

        Args:
            hall_number: Hall containing the ring
            ring_number: Ring number within the hall
        """
        pass
