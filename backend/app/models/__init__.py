"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.trip import Trip
from app.models.bill import Bill
from app.models.participant import Participant

__all__ = [
    "User",
    "Trip",
    "Bill",
    "Participant",
]
