"""
Trip model for group travel expense splitting.
"""
from sqlalchemy import Column, String, Date, ForeignKey, Integer, JSON
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Trip(BaseModel):
    """Trip model representing a named travel event owned by one user."""
    __tablename__ = "trips"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    participant_ids = Column(JSON, nullable=False, default=list)  # Ordered user ids

    # Relationships
    owner = relationship("User", back_populates="trips")

    def is_visible_to(self, user_id: int) -> bool:
        return self.user_id == user_id or user_id in (self.participant_ids or [])
