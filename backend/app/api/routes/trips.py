"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.api.dependencies import get_current_user, get_db, get_settings, get_strategy
from app.core.config import Settings
from app.models.user import User
from app.schemas.trip import (
    TripCreate, TripUpdate, TripResponse, TripSummaryResponse, TripDetailResponse
)
from app.services import trip_service
from app.services.balance_service import BalanceStrategy

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
):
    """Create a new trip."""
    return trip_service.create_trip(current_user, trip_data, db, settings)


@router.get("", response_model=List[TripSummaryResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips owned by current user."""
    return trip_service.list_trips(current_user, db)


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    strategy: BalanceStrategy = Depends(get_strategy),
    db: Session = Depends(get_db)
):
    """Get trip details with bills and balances."""
    return trip_service.get_trip_detail(trip_id, current_user, db, strategy)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update trip name and dates."""
    return trip_service.update_trip(trip_id, current_user, trip_data, db)


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip together with its bills and participants."""
    trip_service.delete_trip(trip_id, current_user, db)
    return {"message": "Trip and related participants deleted successfully"}
