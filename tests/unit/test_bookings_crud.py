"""Unit tests for the booking workflow."""

import uuid
from datetime import date

import pytest

from shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from rental_service.app.crud.bookings import bookings_crud
from rental_service.app.crud.space_sites import spaces_crud
from rental_service.app.enum.rental_enum import BookingStatus
from rental_service.app.models.bookings.bookings import Booking
from rental_service.app.schemas.bookings.bookings_schemas import (
    BookingCreate,
    BookingStatusUpdate,
)


@pytest.fixture
def space(host, make_space):
    return make_space(host.user_id)


@pytest.fixture
def booking(db, renter, space):
    return bookings_crud.create_booking(
        db, renter.user_id,
        BookingCreate(space_id=space.space_id,
                      start_date=date(2024, 3, 1), end_date=date(2024, 3, 5)))


def set_status(value):
    return BookingStatusUpdate(booking_status=value)


class TestCreateBooking:
    """Tests for create_booking."""

    def test_new_booking_is_pending(self, booking, renter, space):
        assert booking.booking_status == BookingStatus.pending
        assert booking.requester_id == renter.user_id
        assert booking.space_id == space.space_id
        assert booking.space_title == "Sunny room"

    def test_host_cannot_book_own_space(self, db, host, space):
        with pytest.raises(ConflictError) as exc:
            bookings_crud.create_booking(
                db, host.user_id,
                BookingCreate(space_id=space.space_id,
                              start_date=date(2024, 3, 1), end_date=date(2024, 3, 5)))

        assert exc.value.message == "You cannot book your own space"
        assert db.query(Booking).count() == 0

    def test_end_must_follow_start(self, db, renter, space):
        with pytest.raises(ValidationError):
            bookings_crud.create_booking(
                db, renter.user_id,
                BookingCreate(space_id=space.space_id,
                              start_date=date(2024, 3, 5), end_date=date(2024, 3, 5)))

    def test_unknown_space(self, db, renter):
        with pytest.raises(NotFoundError):
            bookings_crud.create_booking(
                db, renter.user_id,
                BookingCreate(space_id=uuid.uuid4(),
                              start_date=date(2024, 3, 1), end_date=date(2024, 3, 5)))

    def test_deleted_space_cannot_be_booked(self, db, host, renter, space):
        spaces_crud.delete_space(db, space.space_id, host.user_id)

        with pytest.raises(NotFoundError):
            bookings_crud.create_booking(
                db, renter.user_id,
                BookingCreate(space_id=space.space_id,
                              start_date=date(2024, 3, 1), end_date=date(2024, 3, 5)))

    def test_overlapping_requests_are_accepted(self, db, renter, make_user, space, booking):
        other = make_user(first_name="Olga")

        second = bookings_crud.create_booking(
            db, other.user_id,
            BookingCreate(space_id=space.space_id,
                          start_date=date(2024, 3, 2), end_date=date(2024, 3, 4)))

        assert second.booking_status == BookingStatus.pending


class TestUpdateBookingStatus:
    """Tests for the host/requester authorization split."""

    def test_requester_can_cancel(self, db, renter, booking):
        updated = bookings_crud.update_booking_status(
            db, booking.booking_id, renter.user_id, set_status("canceled"))

        assert updated.booking_status == BookingStatus.canceled

    def test_requester_cannot_confirm(self, db, renter, booking):
        with pytest.raises(AuthorizationError):
            bookings_crud.update_booking_status(
                db, booking.booking_id, renter.user_id, set_status("confirmed"))

    def test_booking_scenario(self, db, renter, booking):
        canceled = bookings_crud.update_booking_status(
            db, booking.booking_id, renter.user_id, set_status("canceled"))
        assert canceled.booking_status == BookingStatus.canceled

        with pytest.raises(AuthorizationError):
            bookings_crud.update_booking_status(
                db, booking.booking_id, renter.user_id, set_status("confirmed"))

        db.expire_all()
        assert db.get(Booking, booking.booking_id).booking_status == "canceled"

    @pytest.mark.parametrize("value", ["confirmed", "completed", "canceled", "pending"])
    def test_host_may_set_any_status(self, db, host, booking, value):
        updated = bookings_crud.update_booking_status(
            db, booking.booking_id, host.user_id, set_status(value))

        assert updated.booking_status.value == value

    def test_stranger_cannot_cancel(self, db, make_user, booking):
        stranger = make_user(first_name="Sam")

        with pytest.raises(AuthorizationError):
            bookings_crud.update_booking_status(
                db, booking.booking_id, stranger.user_id, set_status("canceled"))

    def test_unknown_booking(self, db, host):
        with pytest.raises(NotFoundError):
            bookings_crud.update_booking_status(
                db, uuid.uuid4(), host.user_id, set_status("confirmed"))


class TestBookingQueries:
    """Tests for booking reads."""

    def test_user_and_host_views(self, db, host, renter, booking):
        mine = bookings_crud.get_user_bookings(db, renter.user_id)
        assert [b.booking_id for b in mine] == [booking.booking_id]

        hosted = bookings_crud.get_host_bookings(db, host.user_id)
        assert len(hosted) == 1
        assert hosted[0].first_name == "Uma"
        assert hosted[0].email == "renter@example.com"
        assert hosted[0].space_title == "Sunny room"

        assert bookings_crud.get_host_bookings(db, renter.user_id) == []

    def test_single_booking_visibility(self, db, host, renter, make_user, booking):
        assert bookings_crud.get_booking(db, booking.booking_id, renter.user_id).booking_id == booking.booking_id
        assert bookings_crud.get_booking(db, booking.booking_id, host.user_id).booking_id == booking.booking_id

        stranger = make_user(first_name="Sam")
        with pytest.raises(AuthorizationError):
            bookings_crud.get_booking(db, booking.booking_id, stranger.user_id)
