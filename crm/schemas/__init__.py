from crm.schemas.booking_schema import (
    DEFAULT_SERVICE,
    Booking,
    BookingCreate,
    BookingStatus,
    WebhookAck,
)
from crm.schemas.customer_schema import (
    Customer,
    CustomerCreate,
    CustomerStatus,
    CustomerUpdate,
)
from crm.schemas.stats_schema import DashboardStats, MonthCount, ServiceCount, ZipCount

__all__ = [
    "Booking", "BookingCreate", "BookingStatus", "DEFAULT_SERVICE", "WebhookAck",
    "Customer", "CustomerCreate", "CustomerStatus", "CustomerUpdate",
    "DashboardStats", "MonthCount", "ServiceCount", "ZipCount",
]
