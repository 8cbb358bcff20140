from datetime import datetime, date
from uuid import UUID
from typing import List, Optional
from pydantic import BaseModel

from ...enum.rental_enum import BookingStatus


# ----------------- Create -----------------
class BookingCreate(BaseModel):
    space_id: UUID
    start_date: date
    end_date: date


# ----------------- Status Update -----------------
class BookingStatusUpdate(BaseModel):
    booking_status: BookingStatus


# ----------------- Out -----------------
class BookingOut(BaseModel):
    booking_id: UUID
    space_id: UUID
    requester_id: UUID
    start_date: date
    end_date: date
    booking_status: BookingStatus
    space_title: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class HostBookingOut(BookingOut):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


# ----------------- List Response -----------------
class BookingListResponse(BaseModel):
    bookings: List[BookingOut]


class HostBookingListResponse(BaseModel):
    bookings: List[HostBookingOut]
