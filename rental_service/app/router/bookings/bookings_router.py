from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...schemas.bookings.bookings_schemas import (
    BookingCreate,
    BookingListResponse,
    BookingOut,
    BookingStatusUpdate,
    HostBookingListResponse,
)
from ...crud.bookings import bookings_crud as crud
from shared.core.database import get_db
from shared.core.auth import validate_current_token
from shared.core.schemas import UserToken


router = APIRouter(
    prefix="/api/bookings",
    tags=["Bookings Management"],
    dependencies=[Depends(validate_current_token)],
)


# ---------------- List Bookings ----------------
@router.get("/", response_model=BookingListResponse)
def get_user_bookings(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return {"bookings": crud.get_user_bookings(db, current_user.user_uuid)}


@router.get("/host", response_model=HostBookingListResponse)
def get_host_bookings(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return {"bookings": crud.get_host_bookings(db, current_user.user_uuid)}


@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(
    booking_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.get_booking(db, booking_id, current_user.user_uuid)


# ----------------- Create Booking -----------------
@router.post("/", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
def create_booking_route(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.create_booking(db, current_user.user_uuid, booking)


# ----------------- Update Booking Status -----------------
@router.put("/{booking_id}/status", response_model=BookingOut)
def update_booking_status(
    booking_id: UUID,
    update: BookingStatusUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.update_booking_status(db, booking_id, current_user.user_uuid, update)
