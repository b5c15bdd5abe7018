# barberbook/routers/bookings_routes.py

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends

from barberbook.allocator import BookingAllocator
from barberbook.deps import get_allocator, get_notifier, get_store
from barberbook.errors import NotFoundError
from barberbook.notifications import BookingNotifier
from barberbook.schemas import BookingCreate, BookingPublic, BookingStatusUpdate, MessageResponse
from barberbook.store import EntityStore

router = APIRouter(
    prefix="/api/bookings",
    tags=["bookings"],
)

@router.post("", response_model=BookingPublic, status_code=201)
def create_booking(
    booking: BookingCreate,
    background_tasks: BackgroundTasks,
    allocator: BookingAllocator = Depends(get_allocator),
    notifier: BookingNotifier = Depends(get_notifier),
):
    created = allocator.create_booking(booking)

    # Runs after the response is sent; its outcome never affects the booking
    background_tasks.add_task(notifier.notify_booking, created)
    return created

@router.get("", response_model=List[BookingPublic])
def list_bookings(store: EntityStore = Depends(get_store)):
    return store.get_bookings()

@router.patch("/{booking_id}", response_model=BookingPublic)
def update_booking(
    booking_id: int,
    update: BookingStatusUpdate,
    allocator: BookingAllocator = Depends(get_allocator),
):
    return allocator.update_booking(booking_id, update.status)

@router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(
    booking_id: int,
    allocator: BookingAllocator = Depends(get_allocator),
):
    if not allocator.delete_booking(booking_id):
        raise NotFoundError("Booking not found")
    return {"message": "Booking deleted successfully"}
