"""Shared utilities used across the CRM service."""

import re
import time
import uuid
from datetime import datetime, timezone

PHONE_DIGITS = 10


def normalize_phone(value: str) -> str:
    """Normalize a phone number to its last 10 digits.

    Everything except digits is stripped. Shorter numbers are kept as-is,
    never padded or rejected.

    Examples:
        >>> normalize_phone("+1 (555) 123-4567")
        '5551234567'
        >>> normalize_phone("555-0199")
        '5550199'
    """
    if not value:
        return ""
    digits = re.sub(r"\D", "", value)
    return digits[-PHONE_DIGITS:] if len(digits) >= PHONE_DIGITS else digits


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_id(prefix: str) -> str:
    """Build a record id from the epoch milliseconds and a random suffix."""
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:6]}"
