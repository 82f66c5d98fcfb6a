"""Booking-form CRM: webhook ingestion, customer dedup and dashboard stats."""

__version__ = "0.1.0"
