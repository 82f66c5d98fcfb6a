from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from crm.api.dependencies import get_store
from crm.schemas.booking_schema import Booking
from crm.store.record_store import RecordStore

router = APIRouter()


@router.get("", response_model=list[Booking])
def list_bookings(store: RecordStore = Depends(get_store)):
    return store.list_bookings()


@router.get("/{booking_id}", response_model=Booking)
def get_booking(booking_id: str, store: RecordStore = Depends(get_store)):
    booking = store.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking
