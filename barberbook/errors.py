# barberbook/errors.py

from typing import List, Optional


class BookingError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    """Malformed or missing input. ``errors`` carries field-level detail."""

    status_code = 400

    def __init__(self, message: str, errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.errors = errors or []


class ConflictError(BookingError):
    """The slot was taken, or the booking cannot move to that status."""

    status_code = 409


class NotFoundError(BookingError):
    status_code = 404


def field_errors(pydantic_errors) -> List[dict]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs."""
    flattened = []
    for err in pydantic_errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        flattened.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return flattened
