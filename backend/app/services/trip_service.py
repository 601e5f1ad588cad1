"""
Trip service for trip-related business logic.
"""
from sqlalchemy.orm import Session
from typing import Any, Dict, List
import logging
from app.core.config import Settings
from app.core.exceptions import (
    InvalidParticipantError, NoTripsFoundError, PermissionDeniedError,
    TripNotFoundError, ValidationError
)
from app.models.bill import Bill
from app.models.participant import Participant
from app.models.trip import Trip
from app.models.user import User
from app.schemas.trip import TripCreate, TripUpdate
from app.services.balance_service import (
    BalanceStrategy, UNKNOWN_USERNAME, aggregate_trip_balances
)

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit integer primary key can hold
MAX_ID = 2 ** 63 - 1


def _parse_participant_id(value: Any):
    """Return the id as int if it is syntactically valid, else None."""
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 < value <= MAX_ID else None
    if isinstance(value, str):
        value = value.strip()
        if value.isascii() and value.isdigit() and 0 < int(value) <= MAX_ID:
            return int(value)
    return None


def filter_participant_ids(raw_ids: List[Any], policy: str = "filter") -> List[int]:
    """
    Normalize a list of participant identifiers.

    Valid ids are kept in order with duplicates removed. Invalid ones are
    dropped under the "filter" policy, or reported under "reject".
    """
    valid: List[int] = []
    invalid = []
    for raw in raw_ids or []:
        parsed = _parse_participant_id(raw)
        if parsed is None:
            invalid.append(raw)
        elif parsed not in valid:
            valid.append(parsed)

    if invalid:
        if policy == "reject":
            raise InvalidParticipantError(invalid)
        logger.debug(f"Dropped invalid participant ids: {invalid}")
    return valid


def get_trip(trip_id: int, db: Session) -> Trip:
    trip = db.get(Trip, trip_id)
    if trip is None:
        raise TripNotFoundError()
    return trip


def get_visible_trip(trip_id: int, user: User, db: Session) -> Trip:
    """Trip the user owns, is listed on, or holds a participant position in."""
    trip = get_trip(trip_id, db)
    if trip.is_visible_to(user.id):
        return trip

    has_position = db.query(Participant).filter(
        Participant.trip_id == trip.id,
        Participant.user_id == user.id
    ).first() is not None
    if not has_position:
        raise PermissionDeniedError()
    return trip


def get_owned_trip(trip_id: int, user: User, db: Session) -> Trip:
    """Trip the user owns; required for mutations."""
    trip = get_trip(trip_id, db)
    if trip.user_id != user.id:
        raise PermissionDeniedError()
    return trip


def _owner_brief(trip: Trip) -> Dict:
    owner = trip.owner
    return {"id": trip.user_id, "username": owner.username if owner is not None else UNKNOWN_USERNAME}


def _username(users: Dict[int, User], user_id: int) -> str:
    user = users.get(user_id)
    return user.username if user is not None else UNKNOWN_USERNAME


def _resolve_users(user_ids: List[int], db: Session) -> Dict[int, User]:
    if not user_ids:
        return {}
    users = db.query(User).filter(User.id.in_(set(user_ids))).all()
    return {u.id: u for u in users}


def create_trip(owner: User, trip_data: TripCreate, db: Session, settings: Settings) -> Trip:
    """Create a new trip owned by the given user."""
    participant_ids = filter_participant_ids(trip_data.participants, settings.PARTICIPANT_ID_POLICY)

    trip = Trip(
        user_id=owner.id,
        name=trip_data.name,
        start_date=trip_data.start_date,
        end_date=trip_data.end_date,
        participant_ids=participant_ids
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)

    logger.info(f"Trip {trip.id} created by user {owner.id} with participants {participant_ids}")
    return trip


def list_trips(owner: User, db: Session) -> List[Dict]:
    """List trips owned by the user with names resolved."""
    trips = db.query(Trip).filter(Trip.user_id == owner.id).order_by(Trip.id).all()
    if not trips:
        raise NoTripsFoundError()

    all_ids = [uid for trip in trips for uid in (trip.participant_ids or [])]
    users = _resolve_users(all_ids, db)

    return [
        {
            "id": trip.id,
            "name": trip.name,
            "start_date": trip.start_date,
            "end_date": trip.end_date,
            "owner": _owner_brief(trip),
            "participants": [
                _username(users, uid) for uid in (trip.participant_ids or [])
            ],
        }
        for trip in trips
    ]


def get_trip_detail(trip_id: int, user: User, db: Session, strategy: BalanceStrategy) -> Dict:
    """Compose trip metadata, participants, bills and balances."""
    trip = get_visible_trip(trip_id, user, db)
    aggregated = aggregate_trip_balances(trip.id, db, strategy)

    users = _resolve_users(trip.participant_ids or [], db)
    participants = [
        {"id": uid, "username": _username(users, uid)}
        for uid in (trip.participant_ids or [])
    ]

    bills = []
    for bill in aggregated["bills"]:
        payer = db.get(User, bill.payer_id)
        bills.append({
            "id": bill.id,
            "description": bill.description,
            "amount": bill.amount,
            "payer": payer.username if payer is not None else UNKNOWN_USERNAME,
        })

    return {
        "id": trip.id,
        "name": trip.name,
        "total_cost": aggregated["total_cost"],
        "start_date": trip.start_date,
        "end_date": trip.end_date,
        "owner": _owner_brief(trip),
        "participants": participants,
        "bills": bills,
        "balances": aggregated["balances"],
    }


def update_trip(trip_id: int, user: User, trip_data: TripUpdate, db: Session) -> Trip:
    """Update name and dates of a trip."""
    trip = get_owned_trip(trip_id, user, db)
    changes = trip_data.model_dump(exclude_unset=True, exclude_none=True)

    start_date = changes.get("start_date", trip.start_date)
    end_date = changes.get("end_date", trip.end_date)
    if end_date < start_date:
        raise ValidationError("end_date must not precede start_date")

    for field, value in changes.items():
        setattr(trip, field, value)
    db.commit()
    db.refresh(trip)

    logger.info(f"Trip {trip.id} updated: {sorted(changes)}")
    return trip


def delete_trip(trip_id: int, user: User, db: Session):
    """Delete a trip with its bills and participants in one transaction."""
    trip = get_owned_trip(trip_id, user, db)
    try:
        bills_deleted = db.query(Bill).filter(
            Bill.trip_id == trip.id
        ).delete(synchronize_session=False)
        participants_deleted = db.query(Participant).filter(
            Participant.trip_id == trip.id
        ).delete(synchronize_session=False)
        db.delete(trip)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to delete trip {trip_id}, rolled back", exc_info=True)
        raise

    logger.info(
        f"Trip {trip_id} deleted with {bills_deleted} bills and {participants_deleted} participants"
    )
