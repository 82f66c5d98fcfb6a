"""Dashboard statistics snapshot."""

from pydantic import Field

from crm.schemas.base import CRMModel
from crm.schemas.booking_schema import Booking


class ServiceCount(CRMModel):
    name: str
    count: int


class MonthCount(CRMModel):
    month: str
    count: int


class ZipCount(CRMModel):
    zip: str
    count: int


class DashboardStats(CRMModel):
    """Aggregates recomputed from the full store on every request."""

    total_customers: int = 0
    total_bookings: int = 0
    new_customers_this_month: int = 0
    bookings_this_month: int = 0
    popular_services: list[ServiceCount] = Field(default_factory=list)
    recent_bookings: list[Booking] = Field(default_factory=list)
    bookings_by_month: list[MonthCount] = Field(default_factory=list)
    top_zip_codes: list[ZipCount] = Field(default_factory=list)
