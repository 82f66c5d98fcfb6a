"""Tests for seed data loading."""

import json

from crm.config import DEFAULT_SEED_PATH
from crm.store.seed import load_seed


class TestLoadSeed:
    def test_bundled_seed_loads(self, store):
        customers, bookings = load_seed(store, DEFAULT_SEED_PATH)
        assert customers > 0
        assert bookings > 0
        assert len(store.list_customers()) == customers

    def test_seed_keeps_counters_and_ids(self, store, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({
            "customers": [{
                "id": "cust_x", "name": "Seeded", "phone": "4805550100",
                "totalBookings": 4, "lastVisit": "2026-01-05T10:00:00Z",
                "createdAt": "2025-12-01T10:00:00Z",
            }],
            "bookings": [{
                "id": "book_x", "customerId": "cust_x", "customerName": "Seeded",
                "services": ["Mini Detail"], "date": "2026-01-05T10:00:00Z",
                "createdAt": "2026-01-05T10:00:00Z",
            }],
        }))

        assert load_seed(store, path) == (1, 1)
        customer = store.get_customer("cust_x")
        assert customer.total_bookings == 4
        assert customer.last_visit.year == 2026
        assert store.get_booking("book_x").customer_id == "cust_x"

    def test_missing_sections_are_empty(self, store, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{}")
        assert load_seed(store, path) == (0, 0)
