"""
Dashboard statistics computed by a full scan of the record store.

Nothing is cached; every call rebuilds the snapshot. Month boundaries are
evaluated in the timezone of ``now`` (the local clock by default). Counters
with equal counts keep the order in which each key was first seen while
scanning records in insertion order.
"""

import logging
from collections import Counter
from datetime import datetime
from typing import Optional

from crm.config import StatsConfig, settings
from crm.schemas.stats_schema import DashboardStats, MonthCount, ServiceCount, ZipCount
from crm.store.record_store import RecordStore

logger = logging.getLogger(__name__)

EXCLUDED_ZIP_CODES = frozenset({"", "N/A"})


def _same_month(value: datetime, year: int, month: int, tz) -> bool:
    local = value.astimezone(tz)
    return local.year == year and local.month == month


def _months_back(now: datetime, count: int) -> list[tuple[int, int]]:
    """(year, zero-based month) pairs for the current month and the ``count - 1`` before it, oldest first."""
    current = now.year * 12 + now.month - 1
    return [divmod(index, 12) for index in range(current - count + 1, current + 1)]


def compute_stats(
    store: RecordStore,
    now: Optional[datetime] = None,
    config: Optional[StatsConfig] = None,
) -> DashboardStats:
    """Build the dashboard snapshot from the current store contents."""
    config = config or settings.stats
    if now is None:
        now = datetime.now()
    if now.tzinfo is None:
        now = now.astimezone()
    tz = now.tzinfo
    customers, bookings = store.snapshot()

    new_customers = sum(1 for c in customers if _same_month(c.created_at, now.year, now.month, tz))
    bookings_this_month = sum(1 for b in bookings if _same_month(b.date, now.year, now.month, tz))

    service_counts: Counter[str] = Counter()
    for booking in bookings:
        service_counts.update(booking.services)
    popular_services = [
        ServiceCount(name=name, count=count)
        for name, count in service_counts.most_common(config.popular_services_limit)
    ]

    bookings_by_month = []
    for year, month_index in _months_back(now, config.booking_history_months):
        month_start = datetime(year, month_index + 1, 1)
        count = sum(1 for b in bookings if _same_month(b.date, year, month_index + 1, tz))
        bookings_by_month.append(MonthCount(month=month_start.strftime("%b %y"), count=count))

    zip_counts: Counter[str] = Counter(
        c.zip_code for c in customers if c.zip_code not in EXCLUDED_ZIP_CODES
    )
    top_zip_codes = [
        ZipCount(zip=zip_code, count=count)
        for zip_code, count in zip_counts.most_common(config.top_zip_codes_limit)
    ]

    recent_bookings = sorted(bookings, key=lambda b: b.date, reverse=True)
    recent_bookings = recent_bookings[: config.recent_bookings_limit]

    stats = DashboardStats(
        total_customers=len(customers),
        total_bookings=len(bookings),
        new_customers_this_month=new_customers,
        bookings_this_month=bookings_this_month,
        popular_services=popular_services,
        recent_bookings=recent_bookings,
        bookings_by_month=bookings_by_month,
        top_zip_codes=top_zip_codes,
    )
    logger.debug(
        "Stats computed: %d customers, %d bookings", stats.total_customers, stats.total_bookings
    )
    return stats
