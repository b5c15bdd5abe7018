# barberbook/availability.py

from datetime import date as Date, datetime, timedelta
from typing import Iterable, List, Set, Union

from barberbook.data import shop_settings
from barberbook.models import Booking
from barberbook.schemas import BookingStatus


def slot_grid() -> List[str]:
    """Every bookable start label in a day, earliest first.

    09:00 to 18:00 (exclusive) in 30-minute steps: 18 labels. The grid is
    the same for every barber and every weekday.
    """
    open_at = datetime.strptime(shop_settings["open_time"], "%H:%M")
    close_at = datetime.strptime(shop_settings["close_time"], "%H:%M")
    step = timedelta(minutes=shop_settings["slot_minutes"])

    slots = []
    current = open_at
    while current < close_at:
        slots.append(current.strftime("%H:%M"))
        current += step
    return slots


def as_iso_date(value: Union[Date, str]) -> str:
    if isinstance(value, Date):
        return value.isoformat()
    return value


def taken_slots(bookings: Iterable[Booking], release_cancelled_slots: bool = False) -> Set[str]:
    """Time labels held by ``bookings``.

    Any status blocks its slot unless ``release_cancelled_slots`` is set,
    in which case cancelled bookings are ignored.
    """
    taken = set()
    for b in bookings:
        if release_cancelled_slots and b.status == BookingStatus.cancelled.value:
            continue
        taken.add(b.time)
    return taken


class AvailabilityCalculator:
    def __init__(self, store, release_cancelled_slots: bool = False):
        self.store = store
        self.release_cancelled_slots = release_cancelled_slots

    def compute_availability(self, barber_id: int, date: Union[Date, str]) -> List[str]:
        """Free slot labels for a barber on a date, ascending.

        The barber is not looked up: an unknown id has no bookings and
        gets the full grid.
        """
        existing = self.store.get_bookings_by_barber_and_date(barber_id, as_iso_date(date))
        taken = taken_slots(existing, self.release_cancelled_slots)
        return [slot for slot in slot_grid() if slot not in taken]
