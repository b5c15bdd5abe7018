"""
Tests for slot grid and availability.
"""

from datetime import date

from barberbook.allocator import BookingAllocator
from barberbook.availability import AvailabilityCalculator, slot_grid
from barberbook.store import EntityStore

from tests.helpers import booking_request

FULL_DAY = [f"{h:02d}:{m:02d}" for h in range(9, 18) for m in (0, 30)]


class TestSlotGrid:
    def test_eighteen_half_hour_slots(self):
        slots = slot_grid()

        assert len(slots) == 18
        assert slots[0] == "09:00"
        assert slots[-1] == "17:30"
        assert "18:00" not in slots
        assert slots == FULL_DAY

    def test_ascending(self):
        slots = slot_grid()
        assert slots == sorted(slots)


class TestComputeAvailability:
    def test_empty_day_is_full_grid(self, calculator: AvailabilityCalculator):
        assert calculator.compute_availability(1, "2025-03-10") == FULL_DAY

    def test_booked_slot_is_removed(self, calculator: AvailabilityCalculator, allocator: BookingAllocator):
        allocator.create_booking(booking_request(time="10:00"))

        slots = calculator.compute_availability(1, "2025-03-10")
        assert len(slots) == 17
        assert "10:00" not in slots
        assert slots == [s for s in FULL_DAY if s != "10:00"]

    def test_other_barbers_and_dates_unaffected(self, calculator: AvailabilityCalculator, allocator: BookingAllocator):
        allocator.create_booking(booking_request(time="10:00"))

        assert calculator.compute_availability(2, "2025-03-10") == FULL_DAY
        assert calculator.compute_availability(1, "2025-03-11") == FULL_DAY

    def test_accepts_date_objects(self, calculator: AvailabilityCalculator, allocator: BookingAllocator):
        allocator.create_booking(booking_request(time="09:00"))
        assert "09:00" not in calculator.compute_availability(1, date(2025, 3, 10))

    def test_unknown_barber_gets_full_grid(self, calculator: AvailabilityCalculator):
        assert calculator.compute_availability(999, "2025-03-10") == FULL_DAY

    def test_every_status_blocks_by_default(self, calculator: AvailabilityCalculator, allocator: BookingAllocator):
        completed = allocator.create_booking(booking_request(time="09:00"))
        cancelled = allocator.create_booking(booking_request(time="09:30"))
        allocator.update_booking(completed.id, "completed")
        allocator.update_booking(cancelled.id, "cancelled")

        slots = calculator.compute_availability(1, "2025-03-10")
        assert "09:00" not in slots
        assert "09:30" not in slots

    def test_release_cancelled_slots(self, store: EntityStore, allocator: BookingAllocator):
        calculator = AvailabilityCalculator(store, release_cancelled_slots=True)
        booking = allocator.create_booking(booking_request(time="09:30"))
        allocator.update_booking(booking.id, "cancelled")

        assert "09:30" in calculator.compute_availability(1, "2025-03-10")

    def test_deleted_booking_frees_slot(self, calculator: AvailabilityCalculator, allocator: BookingAllocator):
        booking = allocator.create_booking(booking_request(time="11:00"))
        allocator.delete_booking(booking.id)

        assert "11:00" in calculator.compute_availability(1, "2025-03-10")
