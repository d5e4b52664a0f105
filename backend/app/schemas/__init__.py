from app.schemas.ring import RingResponse

__all__ = ["RingResponse"]
