"""
Maps loosely-named form submissions onto canonical booking fields.

The form builder posts the same logical field under different names
depending on its version and the form's configuration. FIELD_ALIASES is
the single table of accepted source keys per canonical field; the first
non-empty value in probe order wins.

Usage:
    submission = normalize_submission({"Name": "Jo", "Phone Number": "(480) 555-0100"})
    submission.phone  # '4805550100'
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from crm.ingest.services import extract_services
from crm.utils import normalize_phone

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "Name", "full-name", "fullName", "customer-name"),
    "phone": (
        "phone", "Phone", "phone-number", "phoneNumber",
        "telephone", "Phone number", "Phone Number",
    ),
    "email": ("email", "Email", "e-mail"),
    "zip_code": ("zipCode", "zip-code", "zip", "location", "Location", "Location 2"),
    "vehicle": ("vehicle", "Vehicle", "vehicle-type", "vehicleType", "car"),
}

NAME_PART_FIELDS: tuple[str, str] = ("first-name", "last-name")


@dataclass
class NormalizedSubmission:
    """Canonical view of one form submission."""

    name: str = UNKNOWN_NAME
    phone: str = ""
    email: str = ""
    zip_code: str = ""
    vehicle: str = ""
    services: list[str] = field(default_factory=list)


def first_value(payload: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    """Return the first non-empty value among ``keys``, or an empty string."""
    for key in keys:
        value = payload.get(key)
        if value:
            return value if isinstance(value, str) else str(value)
    return ""


def field_value(payload: Mapping[str, Any], canonical: str) -> str:
    return first_value(payload, FIELD_ALIASES[canonical])


def extract_name(payload: Mapping[str, Any]) -> str:
    name = field_value(payload, "name")
    if name:
        return name
    parts = [first_value(payload, (key,)) for key in NAME_PART_FIELDS]
    return " ".join(p for p in parts if p) or UNKNOWN_NAME


def normalize_submission(payload: Mapping[str, Any]) -> NormalizedSubmission:
    """Normalize a raw submission. Never raises on missing or partial data."""
    submission = NormalizedSubmission(
        name=extract_name(payload),
        phone=normalize_phone(field_value(payload, "phone")),
        email=field_value(payload, "email"),
        zip_code=field_value(payload, "zip_code"),
        vehicle=field_value(payload, "vehicle"),
        services=extract_services(payload),
    )
    logger.debug("Normalized submission: %s", submission)
    return submission
