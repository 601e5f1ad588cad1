"""
Participant model holding a user's financial position within a trip.
"""
from sqlalchemy import Column, Numeric, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Participant(BaseModel):
    """A user's paid and owed amounts for one trip."""
    __tablename__ = "participants"
    __table_args__ = (UniqueConstraint("trip_id", "user_id", name="uq_participant_trip_user"),)

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount_paid = Column(Numeric(15, 2), nullable=False, default=0)
    amount_owed = Column(Numeric(15, 2), nullable=False, default=0)

    # Relationships
    user = relationship("User")