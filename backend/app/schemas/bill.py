"""
Pydantic schemas for Bill entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class BillCreate(BaseModel):
    """Schema for bill creation."""
    payer_id: int
    description: Optional[str] = None
    amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)


class BillResponse(BaseModel):
    """Schema for bill response."""
    id: int
    trip_id: int
    payer_id: int
    description: Optional[str] = None
    amount: float
    created_at: datetime

    model_config = {"from_attributes": True}
