"""Customer data models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from crm.schemas.base import CRMModel, ensure_aware
from crm.utils import normalize_phone, utc_now


class CustomerStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    VIP = "vip"


class CustomerCreate(CRMModel):
    """Customer payload without the store-assigned id and createdAt."""

    name: str
    phone: str = ""
    email: str = ""
    zip_code: str = ""
    vehicles: list[str] = Field(default_factory=list)
    total_bookings: int = Field(default=0, ge=0)
    total_spent: float = 0.0
    first_visit: datetime = Field(default_factory=utc_now)
    last_visit: datetime = Field(default_factory=utc_now)
    status: CustomerStatus = CustomerStatus.ACTIVE
    notes: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def _normalize_phone(cls, value: str) -> str:
        return normalize_phone(value)

    @field_validator("vehicles")
    @classmethod
    def _dedupe_vehicles(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(v for v in value if v))

    @field_validator("first_visit", "last_visit")
    @classmethod
    def _aware(cls, value: datetime) -> datetime:
        return ensure_aware(value)


class Customer(CustomerCreate):
    """Customer record held by the store."""

    id: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _aware_created(cls, value: datetime) -> datetime:
        return ensure_aware(value)


class CustomerUpdate(CRMModel):
    """Partial customer update; only fields that were sent are applied."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    zip_code: Optional[str] = None
    vehicles: Optional[list[str]] = None
    total_spent: Optional[float] = None
    status: Optional[CustomerStatus] = None
    notes: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def _normalize_phone(cls, value: Optional[str]) -> Optional[str]:
        return normalize_phone(value) if value is not None else None

    @field_validator("vehicles")
    @classmethod
    def _dedupe_vehicles(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return list(dict.fromkeys(v for v in value if v)) if value is not None else None
