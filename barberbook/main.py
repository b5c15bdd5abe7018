# barberbook/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from barberbook import config
from barberbook.allocator import BookingAllocator
from barberbook.availability import AvailabilityCalculator
from barberbook.db import make_engine
from barberbook.errors import BookingError, ValidationError, field_errors
from barberbook.google_oauth import GoogleOAuthClient
from barberbook.notifications import BookingNotifier
from barberbook.routers.availability_routes import router as availability_router
from barberbook.routers.bookings_routes import router as bookings_router
from barberbook.routers.catalog_routes import router as catalog_router
from barberbook.routers.google_routes import router as google_router
from barberbook.store import EntityStore

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_app(
    store: Optional[EntityStore] = None,
    notifier: Optional[BookingNotifier] = None,
    google_client: Optional[GoogleOAuthClient] = None,
    release_cancelled_slots: Optional[bool] = None,
) -> FastAPI:
    """Build the API around one store. Anything not passed in comes from config."""
    if store is None:
        store = EntityStore(make_engine(config.DATABASE_URL))
        store.seed_defaults()
    if release_cancelled_slots is None:
        release_cancelled_slots = config.RELEASE_CANCELLED_SLOTS

    app = FastAPI(title="Barberbook")
    app.state.store = store
    app.state.allocator = BookingAllocator(store, release_cancelled_slots=release_cancelled_slots)
    app.state.calculator = AvailabilityCalculator(store, release_cancelled_slots=release_cancelled_slots)
    app.state.notifier = notifier or BookingNotifier.from_config()
    app.state.google_client = google_client or GoogleOAuthClient.from_config()

    @app.exception_handler(ValidationError)
    async def booking_validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message, "errors": exc.errors})

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed input is a 400 here, not FastAPI's default 422
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data", "errors": field_errors(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(catalog_router)
    app.include_router(availability_router)
    app.include_router(bookings_router)
    app.include_router(google_router)

    return app


app = create_app()
