"""
In-memory ring provider.
Static hall layout with a fixed set of occupied rings.
"""

from typing import Iterable, Optional

from app.models.ring import Ring
from app.services.interfaces.ring_provider import RingProvider, iter_layout, parse_ring_key


class InMemoryRingProvider(RingProvider):
    """
    Availability from process memory.

    Use when:
    - Local development and tests
    - A single instance owns the layout
    """

    def __init__(self, hall_count: int, rings_per_hall: int, occupied: Iterable[str] = ()):
        self.hall_count = hall_count
        self.rings_per_hall = rings_per_hall
        self.occupied = frozenset(parse_ring_key(key) for key in occupied)

    def _in_layout(self, hall_number: int, ring_number: int) -> bool:
        return 1 <= hall_number <= self.hall_count and 1 <= ring_number <= self.rings_per_hall

    async def get_next_available_ring(self) -> Optional[Ring]:
        for ring in iter_layout(self.hall_count, self.rings_per_hall):
            if (ring.hall_number, ring.number) not in self.occupied:
                return ring
        return None

    async def get_all_available_rings(self) -> list[Ring]:
        return [
            ring for ring in iter_layout(self.hall_count, self.rings_per_hall)
            if (ring.hall_number, ring.number) not in self.occupied
        ]

    async def is_ring_available(self, hall_number: int, ring_number: int) -> bool:
        if not self._in_layout(hall_number, ring_number):
            return False
        return (hall_number, ring_number) not in self.occupied
