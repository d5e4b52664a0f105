"""
Pytest fixtures for the HTTP client and a stand-in ring provider.

The API resolves its provider through the get_ring_provider dependency,
so tests swap in FakeRingProvider via dependency_overrides.
"""

from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.models.ring import Ring
from app.services.interfaces.ring_provider import RingProvider
from app.services.provider_factory import get_ring_provider


class FakeRingProvider(RingProvider):
    """Returns canned answers and records every call."""

    def __init__(self):
        self.next_ring: Optional[Ring] = None
        self.rings: list[Ring] = []
        self.available = True
        self.error: Optional[Exception] = None
        self.calls: list[tuple] = []

    def _answer(self, call: tuple):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    async def get_next_available_ring(self) -> Optional[Ring]:
        self._answer(("get_next_available_ring",))
        return self.next_ring

    async def get_all_available_rings(self) -> list[Ring]:
        self._answer(("get_all_available_rings",))
        return list(self.rings)

    async def is_ring_available(self, hall_number: int, ring_number: int) -> bool:
        self._answer(("is_ring_available", hall_number, ring_number))
        return self.available


@pytest.fixture
def provider() -> FakeRingProvider:
    return FakeRingProvider()


@pytest_asyncio.fixture(scope="function")
async def client(provider: FakeRingProvider) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the provider dependency with the fake."""
    app.dependency_overrides[get_ring_provider] = lambda: provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
