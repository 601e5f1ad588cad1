"""
Participant management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging
from app.api.dependencies import get_current_user, get_db
from app.core.exceptions import NotFoundError, ValidationError
from app.models.participant import Participant
from app.models.user import User
from app.schemas.participant import ParticipantCreate, ParticipantResponse
from app.services.balance_service import UNKNOWN_USERNAME
from app.services.trip_service import get_owned_trip, get_visible_trip

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}/participants", tags=["participants"])


def _to_response(participant: Participant) -> ParticipantResponse:
    return ParticipantResponse(
        id=participant.id,
        trip_id=participant.trip_id,
        user_id=participant.user_id,
        username=participant.user.username if participant.user else UNKNOWN_USERNAME,
        amount_paid=participant.amount_paid,
        amount_owed=participant.amount_owed
    )


@router.post("", response_model=ParticipantResponse, status_code=status.HTTP_201_CREATED)
async def add_participant(
    trip_id: int,
    participant_data: ParticipantCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record a user's paid and owed amounts for the trip."""
    trip = get_owned_trip(trip_id, current_user, db)

    user = db.get(User, participant_data.user_id)
    if not user:
        raise NotFoundError("User not found")

    existing = db.query(Participant).filter(
        Participant.trip_id == trip.id,
        Participant.user_id == user.id
    ).first()
    if existing:
        raise ValidationError("User is already a participant")

    participant = Participant(
        trip_id=trip.id,
        user_id=user.id,
        amount_paid=participant_data.amount_paid,
        amount_owed=participant_data.amount_owed
    )
    db.add(participant)
    db.commit()
    db.refresh(participant)

    logger.info(f"User {user.id} added as participant of trip {trip.id}")
    return _to_response(participant)


@router.get("", response_model=List[ParticipantResponse])
async def list_participants(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List participants of a trip with their amounts."""
    get_visible_trip(trip_id, current_user, db)
    participants = db.query(Participant).filter(
        Participant.trip_id == trip_id
    ).order_by(Participant.id).all()
    return [_to_response(p) for p in participants]


@router.delete("/{participant_id}")
async def remove_participant(
    trip_id: int,
    participant_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Remove a participant from the trip."""
    get_owned_trip(trip_id, current_user, db)

    participant = db.query(Participant).filter(
        Participant.id == participant_id,
        Participant.trip_id == trip_id
    ).first()
    if not participant:
        raise NotFoundError("Participant not found")

    db.delete(participant)
    db.commit()

    logger.info(f"Participant {participant_id} removed from trip {trip_id}")
    return {"message": "Participant removed successfully"}
