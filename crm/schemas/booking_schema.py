"""Booking data models and webhook acknowledgement."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from crm.schemas.base import CRMModel, ensure_aware
from crm.utils import utc_now

DEFAULT_SERVICE = "General Inquiry"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingCreate(CRMModel):
    """Booking payload without the store-assigned id and createdAt.

    customer_name, phone, vehicle and zip_code are a snapshot taken at
    submission time and are not kept in sync with the customer record.
    """

    customer_id: str
    customer_name: str
    phone: str = ""
    vehicle: str = ""
    zip_code: str = ""
    services: list[str] = Field(default_factory=lambda: [DEFAULT_SERVICE], min_length=1)
    date: datetime = Field(default_factory=utc_now)
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def _aware(cls, value: datetime) -> datetime:
        return ensure_aware(value)


class Booking(BookingCreate):
    """Booking record held by the store."""

    id: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _aware_created(cls, value: datetime) -> datetime:
        return ensure_aware(value)


class WebhookAck(CRMModel):
    """Acknowledgement returned to the form system."""

    success: bool
    message: str
    booking_id: str
    customer_id: str
