"""
Ring availability endpoints.
Each request makes exactly one provider call and maps the answer to a status code.
"""

from fastapi import APIRouter, Depends, Response, status

from app.schemas.ring import RingResponse
from app.services.interfaces.ring_provider import RingProvider
from app.services.provider_factory import get_ring_provider
from app.core.metrics import observe_provider_call, record_ring_query
from app.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/rings", tags=["Rings"])


@router.get(
    "/next",
    response_model=RingResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "No ring available"}},
)
async def get_next_ring(provider: RingProvider = Depends(get_ring_provider)):
    """Get the next available ring, or 404 when every ring is taken."""
    with observe_provider_call("next"):
        ring = await provider.get_next_available_ring()

    if ring is None:
        record_ring_query("next", "not_found")
        logger.info("ring_next_not_found")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    record_ring_query("next", "found")
    return RingResponse.model_validate(ring)


@router.get("/", response_model=list[RingResponse])
async def list_available_rings(provider: RingProvider = Depends(get_ring_provider)):
    """List all available rings. Always a list, possibly empty."""
    with observe_provider_call("all"):
        rings = await provider.get_all_available_rings()

    record_ring_query("all", "listed")
    return [RingResponse.model_validate(r) for r in rings]


@router.get(
    "/{hall_number}/{ring_number}/availability",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={status.HTTP_423_LOCKED: {"description": "Ring is not available"}},
)
async def check_ring_availability(
    hall_number: int,
    ring_number: int,
    provider: RingProvider = Depends(get_ring_provider),
):
    """
    Check one ring.
    200 with an empty body if available, 423 Locked otherwise.
    Range checks are left to the provider.
    """
    with observe_provider_call("availability"):
        available = await provider.is_ring_available(hall_number, ring_number)

    if not available:
        record_ring_query("availability", "locked")
        logger.info("ring_locked", hall_number=hall_number, ring_number=ring_number)
        return Response(status_code=status.HTTP_423_LOCKED)

    record_ring_query("availability", "available")
    return Response(status_code=status.HTTP_200_OK)
