"""
Bill management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging
from app.api.dependencies import get_current_user, get_db
from app.core.exceptions import NotFoundError
from app.models.bill import Bill
from app.models.user import User
from app.schemas.bill import BillCreate, BillResponse
from app.services.trip_service import get_owned_trip, get_visible_trip

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}/bills", tags=["bills"])


@router.post("", response_model=BillResponse, status_code=status.HTTP_201_CREATED)
async def create_bill(
    trip_id: int,
    bill_data: BillCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record a bill paid by a user for the trip."""
    trip = get_owned_trip(trip_id, current_user, db)

    payer = db.get(User, bill_data.payer_id)
    if not payer:
        raise NotFoundError("Payer not found")

    bill = Bill(
        trip_id=trip.id,
        payer_id=payer.id,
        description=bill_data.description,
        amount=bill_data.amount
    )
    db.add(bill)
    db.commit()
    db.refresh(bill)

    logger.info(f"Bill {bill.id} of {bill.amount} added to trip {trip.id}")
    return bill


@router.get("", response_model=List[BillResponse])
async def list_bills(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List bills of a trip."""
    get_visible_trip(trip_id, current_user, db)
    return db.query(Bill).filter(Bill.trip_id == trip_id).order_by(Bill.id).all()


@router.delete("/{bill_id}")
async def delete_bill(
    trip_id: int,
    bill_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a bill."""
    get_owned_trip(trip_id, current_user, db)

    bill = db.query(Bill).filter(Bill.id == bill_id, Bill.trip_id == trip_id).first()
    if not bill:
        raise NotFoundError("Bill not found")

    db.delete(bill)
    db.commit()

    logger.info(f"Bill {bill_id} deleted from trip {trip_id}")
    return {"message": "Bill deleted successfully"}
