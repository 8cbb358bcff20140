import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from shared.helpers.db_helper import commit_or_raise
from shared.models.users import Users

from ...enum.rental_enum import BookingStatus
from ...models.bookings.bookings import Booking
from ...models.space_sites.spaces import Space
from ...schemas.bookings.bookings_schemas import (
    BookingCreate,
    BookingOut,
    BookingStatusUpdate,
    HostBookingOut,
)
from ..space_sites.spaces_crud import get_space_by_id

logger = logging.getLogger(__name__)


def to_booking_out(booking: Booking, space_title: Optional[str] = None) -> BookingOut:
    return BookingOut.model_validate({**booking.__dict__, "space_title": space_title})


def is_space_host(db: Session, space_id: UUID, user_id: UUID) -> bool:
    host_id = db.query(Space.host_id).filter(
        Space.space_id == space_id).scalar()
    return host_id is not None and host_id == user_id


def get_booking_by_id(db: Session, booking_id: UUID) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.booking_id == booking_id).first()


def _space_title(db: Session, space_id: UUID) -> Optional[str]:
    return db.query(Space.title).filter(Space.space_id == space_id).scalar()


# ----------------- Get Bookings -----------------


def get_user_bookings(db: Session, requester_id: UUID) -> List[BookingOut]:
    rows = (
        db.query(Booking, Space.title.label("space_title"))
        .join(Space, Booking.space_id == Space.space_id)
        .filter(Booking.requester_id == requester_id)
        .order_by(Booking.start_date.desc())
        .all()
    )
    return [to_booking_out(booking, title) for booking, title in rows]


def get_host_bookings(db: Session, host_id: UUID) -> List[HostBookingOut]:
    rows = (
        db.query(
            Booking,
            Space.title.label("space_title"),
            Users.first_name,
            Users.last_name,
            Users.email,
        )
        .join(Space, Booking.space_id == Space.space_id)
        .join(Users, Booking.requester_id == Users.user_id)
        .filter(Space.host_id == host_id)
        .order_by(Booking.start_date.desc())
        .all()
    )

    results = []
    for row in rows:
        data = {
            **row.Booking.__dict__,
            "space_title": row.space_title,
            "first_name": row.first_name,
            "last_name": row.last_name,
            "email": row.email,
        }
        results.append(HostBookingOut.model_validate(data))
    return results


# ----------------- Get Single Booking -----------------


def get_booking(db: Session, booking_id: UUID, actor_id: UUID) -> BookingOut:
    booking = get_booking_by_id(db, booking_id)
    if not booking:
        raise NotFoundError("Booking not found")

    if booking.requester_id != actor_id and not is_space_host(db, booking.space_id, actor_id):
        raise AuthorizationError("Not authorized to view this booking")

    return to_booking_out(booking, _space_title(db, booking.space_id))


# ----------------- Create Booking -----------------


def create_booking(db: Session, requester_id: UUID, booking: BookingCreate) -> BookingOut:
    if booking.end_date <= booking.start_date:
        raise ValidationError(
            "End date must be after start date", {"field": "end_date"})

    space = get_space_by_id(db, booking.space_id)
    if not space:
        raise NotFoundError("Space not found")

    if space.host_id == requester_id:
        raise ConflictError("You cannot book your own space",
                            {"space_id": str(space.space_id)})

    db_booking = Booking(
        space_id=booking.space_id,
        requester_id=requester_id,
        start_date=booking.start_date,
        end_date=booking.end_date,
        booking_status=BookingStatus.pending.value,
    )
    db.add(db_booking)
    commit_or_raise(db, "creating booking")
    db.refresh(db_booking)

    logger.info("Booking %s requested for space %s",
                db_booking.booking_id, space.space_id)
    return to_booking_out(db_booking, space.title)


# ----------------- Update Booking Status -----------------


def update_booking_status(db: Session, booking_id: UUID, actor_id: UUID, update: BookingStatusUpdate) -> BookingOut:
    """
    The requester may cancel their own booking; every other change is the
    space host's call. Any status may follow any other.
    """
    booking = get_booking_by_id(db, booking_id)
    if not booking:
        raise NotFoundError("Booking not found")

    new_status = BookingStatus(update.booking_status)
    self_cancel = (
        new_status == BookingStatus.canceled
        and booking.requester_id == actor_id
    )
    if not self_cancel and not is_space_host(db, booking.space_id, actor_id):
        raise AuthorizationError("Not authorized to update this booking")

    previous = booking.booking_status
    booking.booking_status = new_status.value
    booking.updated_at = func.now()

    commit_or_raise(db, "updating booking status")
    db.refresh(booking)

    logger.info("Booking %s moved %s -> %s by %s",
                booking_id, previous, new_status.value, actor_id)
    return to_booking_out(booking, _space_title(db, booking.space_id))
