"""
In-memory record store for customers and bookings.

Holds the authoritative data for the lifetime of the process. Storage is
insertion-ordered; listing methods sort at read time. All mutations go
through a re-entrant lock so callers can group several operations (resolve
a customer, then append a booking) into one critical section:

    with store.lock:
        customer = store.find_customer_by_phone(phone)
        ...
        store.add_booking(booking)
"""

import logging
import threading
from collections.abc import Iterable
from typing import Any, Optional

from crm.schemas.booking_schema import Booking, BookingCreate
from crm.schemas.customer_schema import Customer, CustomerCreate
from crm.utils import generate_id, utc_now

logger = logging.getLogger(__name__)

CUSTOMER_ID_PREFIX = "cust"
BOOKING_ID_PREFIX = "book"

# Fields that identify a record and are never overwritten by updates.
_IMMUTABLE_CUSTOMER_FIELDS = frozenset({"id", "created_at"})


class RecordStore:
    """Lock-guarded customer and booking collections."""

    def __init__(self) -> None:
        self._customers: list[Customer] = []
        self._bookings: list[Booking] = []
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # -- customers ---------------------------------------------------------

    def list_customers(self) -> list[Customer]:
        """All customers, most recent lastVisit first."""
        with self._lock:
            return sorted(self._customers, key=lambda c: c.last_visit, reverse=True)

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        with self._lock:
            return next((c for c in self._customers if c.id == customer_id), None)

    def find_customer_by_phone(self, phone: str) -> Optional[Customer]:
        """Exact normalized-phone match. An empty phone never matches."""
        if not phone:
            return None
        with self._lock:
            return next((c for c in self._customers if c.phone and c.phone == phone), None)

    def find_customer_by_name(self, name: str) -> Optional[Customer]:
        """Case-insensitive exact name match."""
        if not name:
            return None
        wanted = name.lower()
        with self._lock:
            return next((c for c in self._customers if c.name.lower() == wanted), None)

    def search_customers(self, query: str) -> list[Customer]:
        """Case-insensitive substring match across name, phone, email and vehicles."""
        q = query.lower()
        return [
            c for c in self.list_customers()
            if q in c.name.lower()
            or q in c.phone
            or q in c.email.lower()
            or any(q in v.lower() for v in c.vehicles)
        ]

    def add_customer(self, data: CustomerCreate) -> Customer:
        customer = Customer(
            **data.model_dump(),
            id=generate_id(CUSTOMER_ID_PREFIX),
            created_at=utc_now(),
        )
        with self._lock:
            self._customers.append(customer)
        logger.info("Customer created: %s (%s)", customer.id, customer.name)
        return customer

    def update_customer(self, customer_id: str, updates: dict[str, Any]) -> Optional[Customer]:
        """Apply a partial update in place. Returns None for an unknown id.

        The whole update is validated before any field is written, so a bad
        value raises pydantic.ValidationError and leaves the record untouched.
        """
        unknown = [key for key in updates if key not in Customer.model_fields]
        if unknown:
            raise KeyError(f"Unknown customer field: {unknown[0]!r}")
        changes = {k: v for k, v in updates.items() if k not in _IMMUTABLE_CUSTOMER_FIELDS}

        with self._lock:
            customer = self.get_customer(customer_id)
            if customer is None:
                return None
            validated = Customer.model_validate({**customer.model_dump(), **changes})
            for key in changes:
                setattr(customer, key, getattr(validated, key))
        logger.info("Customer updated: %s (%s)", customer_id, ", ".join(sorted(updates)))
        return customer

    # -- bookings ----------------------------------------------------------

    def list_bookings(self) -> list[Booking]:
        """All bookings, most recent date first."""
        with self._lock:
            return sorted(self._bookings, key=lambda b: b.date, reverse=True)

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            return next((b for b in self._bookings if b.id == booking_id), None)

    def list_bookings_by_customer(self, customer_id: str) -> list[Booking]:
        return [b for b in self.list_bookings() if b.customer_id == customer_id]

    def add_booking(self, data: BookingCreate) -> Booking:
        """Append a booking and bump the referenced customer's counters.

        An unknown customer_id still stores the booking; the counter update
        is skipped.
        """
        booking = Booking(
            **data.model_dump(),
            id=generate_id(BOOKING_ID_PREFIX),
            created_at=utc_now(),
        )
        with self._lock:
            self._bookings.append(booking)
            customer = self.get_customer(booking.customer_id)
            if customer is not None:
                customer.total_bookings += 1
                customer.last_visit = booking.date
            else:
                logger.warning(
                    "Booking %s references unknown customer %s", booking.id, booking.customer_id
                )
        logger.info("Booking created: %s for customer %s", booking.id, booking.customer_id)
        return booking

    # -- bulk --------------------------------------------------------------

    def load(self, customers: Iterable[Customer], bookings: Iterable[Booking]) -> None:
        """Insert already-identified records without any side effects."""
        with self._lock:
            self._customers.extend(customers)
            self._bookings.extend(bookings)

    def snapshot(self) -> tuple[list[Customer], list[Booking]]:
        """Copies of both collections in insertion order."""
        with self._lock:
            return list(self._customers), list(self._bookings)

    def reset(self) -> None:
        """Clear all records. Used by test fixtures for isolation."""
        with self._lock:
            self._customers.clear()
            self._bookings.clear()
