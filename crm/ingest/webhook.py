"""
Webhook ingestion pipeline, independent of the HTTP framework.

    raw body -> parse_webhook_body -> normalize_submission
             -> find_or_create_customer -> RecordStore.add_booking
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qsl

from crm.ingest.field_normalizer import normalize_submission
from crm.ingest.resolver import find_or_create_customer
from crm.schemas.booking_schema import Booking, BookingCreate, BookingStatus
from crm.schemas.customer_schema import Customer
from crm.store.record_store import RecordStore
from crm.utils import utc_now

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class InvalidPayloadError(ValueError):
    """Raised when a webhook body cannot be parsed into a key/value mapping."""


@dataclass
class IngestResult:
    booking: Booking
    customer: Customer
    customer_created: bool


def _parse_json(body: bytes) -> Any:
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidPayloadError(f"Body is not valid JSON: {exc}") from exc


def parse_webhook_body(content_type: Optional[str], body: bytes) -> dict[str, Any]:
    """Decode a JSON or form-encoded body into a flat mapping.

    Unknown content types are tried as JSON. Anything that does not decode
    to an object raises InvalidPayloadError.
    """
    content_type = (content_type or "").lower()

    if FORM_CONTENT_TYPE in content_type:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidPayloadError(f"Form body is not UTF-8: {exc}") from exc
        return dict(parse_qsl(text, keep_blank_values=True))

    data = _parse_json(body)
    if not isinstance(data, dict):
        raise InvalidPayloadError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def ingest_submission(store: RecordStore, payload: Mapping[str, Any]) -> IngestResult:
    """Normalize a submission, resolve its customer and append a pending booking.

    Resolution and the booking append run under the store lock so concurrent
    deliveries for the same phone cannot create duplicate customers.
    """
    submission = normalize_submission(payload)

    with store.lock:
        customer, created = find_or_create_customer(store, submission)
        booking = store.add_booking(
            BookingCreate(
                customer_id=customer.id,
                customer_name=submission.name,
                phone=submission.phone,
                vehicle=submission.vehicle,
                zip_code=submission.zip_code,
                services=submission.services,
                date=utc_now(),
                status=BookingStatus.PENDING,
            )
        )

    logger.info("Created booking: %s for customer: %s", booking.id, customer.id)
    return IngestResult(booking=booking, customer=customer, customer_created=created)
