# barberbook/models.py

from typing import Optional
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# AUTOINCREMENT keeps SQLite from handing out a deleted row's id again
class Barber(SQLModel, table=True):
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    title: str
    experience: str
    rating: str
    avatar: str

class Service(SQLModel, table=True):
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    duration: int  # minutes
    price: int  # cents

class Booking(SQLModel, table=True):
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)

    customer_name: str
    customer_phone: str
    barber_id: int = Field(index=True)
    service_id: int
    date: str = Field(index=True)  # YYYY-MM-DD
    time: str  # HH:MM slot label
    status: str = "confirmed"
    created_at: datetime = Field(default_factory=_utcnow)
