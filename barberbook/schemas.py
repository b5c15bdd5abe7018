# barberbook/schemas.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from enum import Enum
from datetime import datetime, date
from typing import Literal

TIME_LABEL_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def check_iso_date(value: str) -> str:
    """Reject pattern-valid strings that are not real calendar days (2025-02-30)."""
    date.fromisoformat(value)
    return value


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class BookingStatus(str, Enum):
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"

class BarberPublic(CamelModel):
    id: int
    name: str
    title: str
    experience: str
    rating: str
    avatar: str

class ServicePublic(CamelModel):
    id: int
    name: str
    duration: int
    price: int

class BookingCreate(CamelModel):
    customer_name: str = Field(min_length=1)
    customer_phone: str = Field(min_length=1)
    # strict: JSON true or "1" is not an id
    barber_id: int = Field(strict=True)
    service_id: int = Field(strict=True)
    date: str = Field(pattern=ISO_DATE_PATTERN)
    time: str = Field(pattern=TIME_LABEL_PATTERN)
    # New bookings always start out confirmed
    status: Literal["confirmed"] = "confirmed"

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return check_iso_date(v)

class BookingStatusUpdate(CamelModel):
    status: BookingStatus

class BookingPublic(CamelModel):
    id: int
    customer_name: str
    customer_phone: str
    barber_id: int
    service_id: int
    date: str
    time: str
    status: BookingStatus
    created_at: datetime

class MessageResponse(BaseModel):
    message: str

class GoogleAuthUrl(CamelModel):
    auth_url: str

class GoogleConnection(CamelModel):
    connected: bool = True
    user_id: str
    expiry_date: int  # ms since epoch

class GoogleRefreshRequest(CamelModel):
    user_id: str = Field(min_length=1)
