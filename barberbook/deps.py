# barberbook/deps.py

from fastapi import Request

from barberbook.allocator import BookingAllocator
from barberbook.availability import AvailabilityCalculator
from barberbook.google_oauth import GoogleOAuthClient
from barberbook.notifications import BookingNotifier
from barberbook.store import EntityStore


# Collaborators are built once in create_app() and hung off app.state

def get_store(request: Request) -> EntityStore:
    return request.app.state.store

def get_allocator(request: Request) -> BookingAllocator:
    return request.app.state.allocator

def get_calculator(request: Request) -> AvailabilityCalculator:
    return request.app.state.calculator

def get_notifier(request: Request) -> BookingNotifier:
    return request.app.state.notifier

def get_google_client(request: Request) -> GoogleOAuthClient:
    return request.app.state.google_client
