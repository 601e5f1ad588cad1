"""
Pydantic schemas for Participant entity.
"""
from pydantic import BaseModel, Field
from decimal import Decimal


class ParticipantCreate(BaseModel):
    """Schema for adding a participant's position to a trip."""
    user_id: int
    amount_paid: Decimal = Field(Decimal("0"), ge=0, max_digits=15, decimal_places=2)
    amount_owed: Decimal = Field(Decimal("0"), ge=0, max_digits=15, decimal_places=2)


class ParticipantResponse(BaseModel):
    """Schema for participant response."""
    id: int
    trip_id: int
    user_id: int
    username: str
    amount_paid: float
    amount_owed: float
