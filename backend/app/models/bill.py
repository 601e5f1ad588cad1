"""
Bill model for a single expense within a trip.
"""
from sqlalchemy import Column, Numeric, ForeignKey, Integer, Text
from app.db.base import BaseModel


class Bill(BaseModel):
    """Bill paid by one user on behalf of the trip."""
    __tablename__ = "bills"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    payer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    description = Column(Text, nullable=True)
    amount = Column(Numeric(15, 2), nullable=False)
