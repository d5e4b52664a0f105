"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing the API layer.
"""

from .ring_provider import RingProvider, RingProviderError
from .memory_ring_provider import InMemoryRingProvider

__all__ = ['RingProvider', 'RingProviderError', 'InMemoryRingProvider']
