"""Tests for dashboard statistics."""

from datetime import datetime, timedelta, timezone

from crm.config import StatsConfig
from crm.stats import compute_stats
from tests.conftest import NOW, make_booking, make_customer


class TestEmptyStore:
    def test_all_zero(self, store):
        stats = compute_stats(store, now=NOW)
        assert stats.total_customers == 0
        assert stats.total_bookings == 0
        assert stats.new_customers_this_month == 0
        assert stats.bookings_this_month == 0
        assert stats.popular_services == []
        assert stats.top_zip_codes == []
        assert stats.recent_bookings == []
        assert len(stats.bookings_by_month) == 12
        assert all(m.count == 0 for m in stats.bookings_by_month)


class TestCounts:
    def test_totals_and_this_month(self, store):
        last_month = datetime(2026, 9, 15, 12, 0, tzinfo=timezone.utc)
        last_year = datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc)
        store.load(
            [
                make_customer(customer_id="c1", created_at=NOW),
                make_customer(customer_id="c2", created_at=last_month),
                make_customer(customer_id="c3", created_at=last_year),
            ],
            [
                make_booking(booking_id="b1", date=NOW),
                make_booking(booking_id="b2", date=NOW - timedelta(days=3)),
                make_booking(booking_id="b3", date=last_month),
                make_booking(booking_id="b4", date=last_year),
            ],
        )
        stats = compute_stats(store, now=NOW)
        assert stats.total_customers == 3
        assert stats.total_bookings == 4
        assert stats.new_customers_this_month == 1
        assert stats.bookings_this_month == 2


class TestPopularServices:
    def test_counts_every_service_entry(self, store):
        store.load([], [
            make_booking(booking_id="b1", services=["A", "B"]),
            make_booking(booking_id="b2", services=["A"]),
            make_booking(booking_id="b3", services=["A", "C"]),
        ])
        popular = compute_stats(store, now=NOW).popular_services
        assert [(s.name, s.count) for s in popular] == [("A", 3), ("B", 1), ("C", 1)]

    def test_ties_keep_first_seen_order(self, store):
        store.load([], [
            make_booking(booking_id="b1", services=["Zeta"]),
            make_booking(booking_id="b2", services=["Alpha"]),
        ])
        popular = compute_stats(store, now=NOW).popular_services
        assert [s.name for s in popular] == ["Zeta", "Alpha"]

    def test_truncated_to_top_eight(self, store):
        store.load([], [
            make_booking(booking_id=f"b{i}", services=[f"Service {i}"]) for i in range(12)
        ])
        assert len(compute_stats(store, now=NOW).popular_services) == 8


class TestBookingsByMonth:
    def test_twelve_months_oldest_first(self, store):
        months = compute_stats(store, now=NOW).bookings_by_month
        assert months[0].month == "Nov 25"
        assert months[-1].month == "Oct 26"

    def test_year_boundary(self, store):
        now = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)
        months = compute_stats(store, now=now).bookings_by_month
        assert [m.month for m in months[-2:]] == ["Dec 25", "Jan 26"]
        assert months[0].month == "Feb 25"

    def test_counts_per_month(self, store):
        store.load([], [
            make_booking(booking_id="b1", date=NOW),
            make_booking(booking_id="b2", date=datetime(2026, 8, 3, 12, 0, tzinfo=timezone.utc)),
            make_booking(booking_id="b3", date=datetime(2026, 8, 20, 12, 0, tzinfo=timezone.utc)),
            make_booking(booking_id="b4", date=datetime(2024, 8, 20, 12, 0, tzinfo=timezone.utc)),
        ])
        counts = {m.month: m.count for m in compute_stats(store, now=NOW).bookings_by_month}
        assert counts["Oct 26"] == 1
        assert counts["Aug 26"] == 2
        assert sum(counts.values()) == 3

    def test_custom_history_length(self, store):
        config = StatsConfig()
        object.__setattr__(config, "booking_history_months", 3)
        months = compute_stats(store, now=NOW, config=config).bookings_by_month
        assert [m.month for m in months] == ["Aug 26", "Sep 26", "Oct 26"]


class TestTopZipCodes:
    def test_counts_customers_once_and_skips_placeholders(self, store):
        store.load(
            [
                make_customer(customer_id="c1", zip_code="85251"),
                make_customer(customer_id="c2", zip_code="85016"),
                make_customer(customer_id="c3", zip_code="85251"),
                make_customer(customer_id="c4", zip_code="N/A"),
                make_customer(customer_id="c5", zip_code=""),
            ],
            [make_booking(booking_id=f"b{i}") for i in range(5)],
        )
        zips = compute_stats(store, now=NOW).top_zip_codes
        assert [(z.zip, z.count) for z in zips] == [("85251", 2), ("85016", 1)]

    def test_truncated_to_top_ten(self, store):
        store.load(
            [make_customer(customer_id=f"c{i}", zip_code=f"850{i:02d}") for i in range(15)], []
        )
        assert len(compute_stats(store, now=NOW).top_zip_codes) == 10


class TestRecentBookings:
    def test_ten_most_recent_by_date(self, store):
        store.load([], [
            make_booking(booking_id=f"b{i}", date=NOW - timedelta(days=i)) for i in reversed(range(12))
        ])
        recent = compute_stats(store, now=NOW).recent_bookings
        assert [b.id for b in recent] == [f"b{i}" for i in range(10)]

    def test_serializes_with_camel_case(self, store):
        store.load([], [make_booking()])
        data = compute_stats(store, now=NOW).model_dump(by_alias=True)
        assert data["recentBookings"][0]["customerId"] == "cust_test_1"
        assert "popularServices" in data
        assert "topZipCodes" in data
