# barberbook/store.py

import logging
import threading
from typing import List, Optional

from sqlalchemy import desc
from sqlmodel import Session, select

from barberbook.data import DEFAULT_BARBERS, DEFAULT_SERVICES
from barberbook.models import Barber, Booking, Service

logger = logging.getLogger(__name__)


class EntityStore:
    """Keyed storage for barbers, services and bookings.

    One instance is built at startup and handed to the request layer and
    the allocator. Every method holds ``lock`` for its whole duration; the
    lock is re-entrant so the allocator can hold it across a read and the
    following insert.
    """

    def __init__(self, engine):
        self.engine = engine
        self.lock = threading.RLock()

    def _session(self) -> Session:
        # Returned rows are read after the session closes
        return Session(self.engine, expire_on_commit=False)

    def _add(self, record):
        with self.lock, self._session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)  # fills record.id
            return record

    def _delete(self, model, record_id: int) -> bool:
        with self.lock, self._session() as session:
            record = session.get(model, record_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True

    def seed_defaults(self) -> None:
        with self.lock:
            if not self.get_barbers():
                for barber in DEFAULT_BARBERS:
                    self.create_barber(**barber)
                logger.info("Seeded %d barbers", len(DEFAULT_BARBERS))
            if not self.get_services():
                for service in DEFAULT_SERVICES:
                    self.create_service(**service)
                logger.info("Seeded %d services", len(DEFAULT_SERVICES))

    # Barbers

    def get_barbers(self) -> List[Barber]:
        with self.lock, self._session() as session:
            return list(session.exec(select(Barber).order_by(Barber.id)).all())

    def get_barber(self, barber_id: int) -> Optional[Barber]:
        with self.lock, self._session() as session:
            return session.get(Barber, barber_id)

    def create_barber(self, **fields) -> Barber:
        return self._add(Barber(**fields))

    def delete_barber(self, barber_id: int) -> bool:
        return self._delete(Barber, barber_id)

    # Services

    def get_services(self) -> List[Service]:
        with self.lock, self._session() as session:
            return list(session.exec(select(Service).order_by(Service.id)).all())

    def get_service(self, service_id: int) -> Optional[Service]:
        with self.lock, self._session() as session:
            return session.get(Service, service_id)

    def create_service(self, **fields) -> Service:
        return self._add(Service(**fields))

    def delete_service(self, service_id: int) -> bool:
        return self._delete(Service, service_id)

    # Bookings

    def get_bookings(self) -> List[Booking]:
        """All bookings, latest appointment first.

        ISO dates and zero-padded ``HH:MM`` labels sort the same way as the
        instants they name, so ordering on the two columns is enough.
        """
        with self.lock, self._session() as session:
            stmt = select(Booking).order_by(desc(Booking.date), desc(Booking.time), desc(Booking.id))
            return list(session.exec(stmt).all())

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        with self.lock, self._session() as session:
            return session.get(Booking, booking_id)

    def get_bookings_by_date(self, date: str) -> List[Booking]:
        with self.lock, self._session() as session:
            stmt = select(Booking).where(Booking.date == date).order_by(Booking.time)
            return list(session.exec(stmt).all())

    def get_bookings_by_barber_and_date(self, barber_id: int, date: str) -> List[Booking]:
        with self.lock, self._session() as session:
            stmt = (
                select(Booking)
                .where(Booking.barber_id == barber_id)
                .where(Booking.date == date)
                .order_by(Booking.time)
            )
            return list(session.exec(stmt).all())

    def create_booking(self, **fields) -> Booking:
        return self._add(Booking(**fields))

    def update_booking(self, booking_id: int, **updates) -> Optional[Booking]:
        with self.lock, self._session() as session:
            booking = session.get(Booking, booking_id)
            if booking is None:
                return None
            for key, value in updates.items():
                setattr(booking, key, value)
            session.add(booking)
            session.commit()
            session.refresh(booking)
            return booking

    def delete_booking(self, booking_id: int) -> bool:
        return self._delete(Booking, booking_id)
