# barberbook/allocator.py

import logging
from datetime import datetime, timezone
from typing import Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from barberbook.availability import slot_grid, taken_slots
from barberbook.errors import ConflictError, NotFoundError, ValidationError, field_errors
from barberbook.models import Booking
from barberbook.schemas import BookingCreate, BookingStatus

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = {BookingStatus.completed.value, BookingStatus.cancelled.value}


class BookingAllocator:
    """Creates bookings and moves them through their status lifecycle.

    The store is the only thing written to; notifying the customer is left
    to the caller.
    """

    def __init__(self, store, release_cancelled_slots: bool = False):
        self.store = store
        self.release_cancelled_slots = release_cancelled_slots

    def _parse(self, request: Union[BookingCreate, Mapping]) -> BookingCreate:
        if isinstance(request, BookingCreate):
            return request
        try:
            return BookingCreate.model_validate(request)
        except PydanticValidationError as e:
            raise ValidationError("Invalid booking data", field_errors(e.errors()))

    def create_booking(self, request: Union[BookingCreate, Mapping]) -> Booking:
        # 1) Shape
        data = self._parse(request)
        booking_date = data.date

        # 2) References and slot label
        errors = []
        if self.store.get_barber(data.barber_id) is None:
            errors.append({"field": "barberId", "message": "Barber not found"})
        if self.store.get_service(data.service_id) is None:
            errors.append({"field": "serviceId", "message": "Service not found"})
        if data.time not in slot_grid():
            errors.append({"field": "time", "message": "Time is not a bookable slot"})
        if errors:
            raise ValidationError("Invalid booking data", errors)

        with self.store.lock:
            # 3) Recheck against what is stored now, not what the client saw
            existing = self.store.get_bookings_by_barber_and_date(data.barber_id, booking_date)
            if data.time in taken_slots(existing, self.release_cancelled_slots):
                logger.warning(
                    "Slot %s %s already taken for barber %s", booking_date, data.time, data.barber_id
                )
                raise ConflictError("This time slot is no longer available")

            # 4) Insert
            booking = self.store.create_booking(
                customer_name=data.customer_name,
                customer_phone=data.customer_phone,
                barber_id=data.barber_id,
                service_id=data.service_id,
                date=booking_date,
                time=data.time,
                status=BookingStatus.confirmed.value,
                created_at=datetime.now(timezone.utc),
            )

        logger.info(
            "Created booking %s for barber %s on %s at %s", booking.id, booking.barber_id, booking.date, booking.time
        )
        return booking

    def update_booking(self, booking_id: int, status) -> Booking:
        try:
            new_status = BookingStatus(status).value
        except ValueError:
            raise ValidationError("Invalid status", [{"field": "status", "message": f"Unknown status {status!r}"}])

        with self.store.lock:
            booking = self.store.get_booking(booking_id)
            if booking is None:
                raise NotFoundError("Booking not found")

            if booking.status == new_status:
                return booking
            if booking.status in TERMINAL_STATUSES:
                raise ConflictError(f"Booking is already {booking.status}")

            booking = self.store.update_booking(booking_id, status=new_status)

        logger.info("Booking %s is now %s", booking_id, new_status)
        return booking

    def delete_booking(self, booking_id: int) -> bool:
        deleted = self.store.delete_booking(booking_id)
        if deleted:
            logger.info("Deleted booking %s", booking_id)
        return deleted
