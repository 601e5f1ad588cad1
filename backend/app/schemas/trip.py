"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, List, Optional
from datetime import date, datetime


class UserBrief(BaseModel):
    """Minimal user reference used inside trip payloads."""
    id: int
    username: str

    model_config = {"from_attributes": True}


class TripBase(BaseModel):
    """Base trip schema."""
    name: str = Field(..., min_length=1, max_length=200)
    start_date: date
    end_date: date

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class TripCreate(TripBase):
    """Schema for trip creation."""
    # Raw identifiers; malformed ones are handled by the participant id policy
    participants: List[Any] = []


class TripUpdate(BaseModel):
    """Schema for trip update. Only these fields can change."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class TripResponse(BaseModel):
    """Schema for trip response."""
    id: int
    user_id: int
    name: str
    start_date: date
    end_date: date
    participant_ids: List[int] = []
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TripSummaryResponse(BaseModel):
    """Schema for an entry of the trip list."""
    id: int
    name: str
    start_date: date
    end_date: date
    owner: UserBrief
    participants: List[str] = []  # Usernames


class TripBillResponse(BaseModel):
    """Bill as shown inside the trip detail, with the payer's name resolved."""
    id: int
    description: Optional[str] = None
    amount: float
    payer: str


class BalanceResponse(BaseModel):
    """Financial position of one participant."""
    user_id: int
    username: str
    amount_paid: float
    amount_owed: float
    balance: float  # Positive: the group owes this user


class TripDetailResponse(BaseModel):
    """Schema for detailed trip response with bills and balances."""
    id: int
    name: str
    total_cost: float
    start_date: date
    end_date: date
    owner: UserBrief
    participants: List[UserBrief] = []
    bills: List[TripBillResponse] = []
    balances: List[BalanceResponse] = []
