from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from crm.api.dependencies import get_store
from crm.schemas.booking_schema import Booking
from crm.schemas.customer_schema import Customer, CustomerCreate, CustomerUpdate
from crm.store.record_store import RecordStore

router = APIRouter()


def _get_customer_or_404(store: RecordStore, customer_id: str) -> Customer:
    customer = store.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("", response_model=list[Customer])
def list_customers(
    q: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
):
    """
    All customers, most recent visit first.
    With ``q``, only those whose name, phone, email or a vehicle contains it.
    """
    if q:
        return store.search_customers(q)
    return store.list_customers()


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, store: RecordStore = Depends(get_store)):
    return store.add_customer(payload)


@router.get("/{customer_id}", response_model=Customer)
def get_customer(customer_id: str, store: RecordStore = Depends(get_store)):
    return _get_customer_or_404(store, customer_id)


@router.patch("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: str,
    payload: CustomerUpdate,
    store: RecordStore = Depends(get_store),
):
    data = payload.model_dump(exclude_unset=True)

    if "name" in data and data["name"] is not None:
        data["name"] = data["name"].strip()

    # An explicit null only clears notes; other fields keep their value
    data = {k: v for k, v in data.items() if v is not None or k == "notes"}

    customer = store.update_customer(customer_id, data)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/{customer_id}/bookings", response_model=list[Booking])
def list_customer_bookings(customer_id: str, store: RecordStore = Depends(get_store)):
    _get_customer_or_404(store, customer_id)
    return store.list_bookings_by_customer(customer_id)
