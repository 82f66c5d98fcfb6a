"""Shared test fixtures and helpers."""

from datetime import datetime, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from crm.api.app import create_app
from crm.schemas.booking_schema import Booking, BookingStatus
from crm.schemas.customer_schema import Customer, CustomerStatus
from crm.store.record_store import RecordStore

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


def make_customer(
    customer_id: str = "cust_test_1",
    name: str = "Jordan Lee",
    phone: str = "4805550100",
    email: str = "",
    zip_code: str = "85251",
    vehicles: Optional[list[str]] = None,
    total_bookings: int = 0,
    last_visit: datetime = NOW,
    created_at: datetime = NOW,
) -> Customer:
    """Helper to create a Customer with sensible defaults."""
    return Customer(
        id=customer_id,
        name=name,
        phone=phone,
        email=email,
        zip_code=zip_code,
        vehicles=vehicles or [],
        total_bookings=total_bookings,
        first_visit=created_at,
        last_visit=last_visit,
        status=CustomerStatus.ACTIVE,
        created_at=created_at,
    )


def make_booking(
    booking_id: str = "book_test_1",
    customer_id: str = "cust_test_1",
    services: Optional[list[str]] = None,
    date: datetime = NOW,
) -> Booking:
    """Helper to create a Booking with sensible defaults."""
    return Booking(
        id=booking_id,
        customer_id=customer_id,
        customer_name="Jordan Lee",
        phone="4805550100",
        vehicle="2020 Subaru Outback",
        zip_code="85251",
        services=services or ["Mini Detail"],
        date=date,
        status=BookingStatus.PENDING,
        created_at=date,
    )
