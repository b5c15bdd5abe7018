# barberbook/routers/catalog_routes.py

from typing import List

from fastapi import APIRouter, Depends

from barberbook.deps import get_store
from barberbook.schemas import BarberPublic, ServicePublic
from barberbook.store import EntityStore

router = APIRouter(
    prefix="/api",
    tags=["catalog"],
)

@router.get("/barbers", response_model=List[BarberPublic])
def list_barbers(store: EntityStore = Depends(get_store)):
    return store.get_barbers()

@router.get("/services", response_model=List[ServicePublic])
def list_services(store: EntityStore = Depends(get_store)):
    return store.get_services()
