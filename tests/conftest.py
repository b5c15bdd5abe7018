from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from barberbook.allocator import BookingAllocator
from barberbook.availability import AvailabilityCalculator
from barberbook.db import make_engine
from barberbook.google_oauth import GoogleOAuthClient
from barberbook.main import create_app
from barberbook.notifications import BookingNotifier
from barberbook.store import EntityStore


@pytest.fixture
def empty_store() -> EntityStore:
    # Each sqlite:// engine is its own private in-memory database
    return EntityStore(make_engine("sqlite://"))


@pytest.fixture
def store(empty_store: EntityStore) -> EntityStore:
    empty_store.seed_defaults()
    return empty_store


@pytest.fixture
def allocator(store: EntityStore) -> BookingAllocator:
    return BookingAllocator(store)


@pytest.fixture
def calculator(store: EntityStore) -> AvailabilityCalculator:
    return AvailabilityCalculator(store)


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock(spec=BookingNotifier)


@pytest.fixture
def client(store: EntityStore, notifier: MagicMock) -> TestClient:
    google = GoogleOAuthClient(client_id=None, client_secret=None, redirect_uri="http://test/cb", secret_key="test")
    app = create_app(store=store, notifier=notifier, google_client=google, release_cancelled_slots=False)
    return TestClient(app)
