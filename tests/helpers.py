def booking_request(**overrides) -> dict:
    """A valid POST /api/bookings body; override any field."""
    request = {
        "customerName": "Jane Roe",
        "customerPhone": "555-0100",
        "barberId": 1,
        "serviceId": 1,
        "date": "2025-03-10",
        "time": "10:00",
        "status": "confirmed",
    }
    request.update(overrides)
    return request
