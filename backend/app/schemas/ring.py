"""
Pydantic schemas for ring responses.
Wire field names are "Number" and "HallNumber".
"""

from pydantic import BaseModel, Field


class RingResponse(BaseModel):
    number: int = Field(..., alias="Number")
    hall_number: int = Field(..., alias="HallNumber")

    model_config = {"from_attributes": True, "populate_by_name": True}
