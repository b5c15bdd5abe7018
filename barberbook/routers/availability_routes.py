# barberbook/routers/availability_routes.py

from typing import List

from fastapi import APIRouter, Depends, Query

from barberbook.availability import AvailabilityCalculator
from barberbook.deps import get_calculator
from barberbook.errors import ValidationError
from barberbook.schemas import ISO_DATE_PATTERN, check_iso_date

router = APIRouter(
    prefix="/api",
    tags=["availability"],
)

@router.get("/availability", response_model=List[str])
def get_availability(
    barber_id: int = Query(alias="barberId"),
    date: str = Query(pattern=ISO_DATE_PATTERN),
    calculator: AvailabilityCalculator = Depends(get_calculator),
):
    # Missing or malformed parameters are rejected with 400 by the app's validation handler
    try:
        check_iso_date(date)
    except ValueError:
        raise ValidationError("Invalid request data", [{"field": "date", "message": "Not a calendar date"}])
    return calculator.compute_availability(barber_id, date)
