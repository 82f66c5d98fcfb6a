"""Bootstrap data loaded once at process start."""

import json
import logging
from pathlib import Path
from typing import Union

from crm.schemas.booking_schema import Booking
from crm.schemas.customer_schema import Customer
from crm.store.record_store import RecordStore

logger = logging.getLogger(__name__)


def load_seed(store: RecordStore, path: Union[str, Path]) -> tuple[int, int]:
    """Load ``{"customers": [...], "bookings": [...]}`` into the store.

    Records keep their ids, counters and timestamps as written in the file.
    Returns the number of customers and bookings loaded.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    customers = [Customer.model_validate(c) for c in raw.get("customers", [])]
    bookings = [Booking.model_validate(b) for b in raw.get("bookings", [])]
    store.load(customers, bookings)
    logger.info("Seed loaded from %s: %d customers, %d bookings", path, len(customers), len(bookings))
    return len(customers), len(bookings)
