"""Service catalog and checkbox-style service extraction."""

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

from crm.schemas.booking_schema import DEFAULT_SERVICE

logger = logging.getLogger(__name__)

# Form field identifier -> display name. Definition order is the order
# services are reported in.
SERVICE_CATALOG: dict[str, str] = {
    "complete-exterior-package": "Complete Exterior Package",
    "premium-interior-package": "Premium Interior Package",
    "complete-interior-package": "Complete Interior Package",
    "premium-wash-package": "Premium Wash Package",
    "1-step-paint-correction": "1 Step Paint Correction",
    "aov-optimization": "AOV Optimization",
    "graphene-ceramic-coating": "Graphene Ceramic Coating",
    "mini-detail": "Mini Detail",
    "maintenance-wash-wipe-package": "Maintenance Wash & Wipe Package",
    "extra-add-on-services": "Extra Add-On Services",
    "2-step-paint-correction": "2 Step Paint Correction",
    "adams-graphene-ceramic-coating": "Adams Graphene Ceramic Coating",
}

SINGLE_SERVICE_FIELDS: tuple[str, ...] = ("service", "Service", "service-type", "serviceType")


def service_field_variants(identifier: str, display_name: str) -> Iterator[str]:
    """Yield the field names a checkbox for this service may be posted under."""
    yield identifier
    yield identifier.replace("-", "_")
    yield identifier.replace("-", " ")
    slug = display_name.lower()
    yield re.sub(r"\s+", "-", slug)
    yield re.sub(r"\s+", "_", slug)


def is_checked(value: Any) -> bool:
    """A checkbox counts as ticked when non-empty and not the string 'false'."""
    return bool(value) and value != "false"


def extract_services(payload: Mapping[str, Any]) -> list[str]:
    """Collect requested services from checkbox fields and a single service field.

    Falls back to ``["General Inquiry"]`` when nothing is selected.
    """
    services: list[str] = []

    for identifier, display_name in SERVICE_CATALOG.items():
        if any(is_checked(payload.get(v)) for v in service_field_variants(identifier, display_name)):
            services.append(display_name)

    single = next((payload[k] for k in SINGLE_SERVICE_FIELDS if payload.get(k)), None)
    if single:
        single = str(single)
        if single not in services:
            services.append(single)

    if not services:
        logger.debug("No services selected, defaulting to %r", DEFAULT_SERVICE)
        return [DEFAULT_SERVICE]
    return services


def get_all_services() -> list[dict]:
    """Return the catalog as id/name pairs."""
    return [{"id": sid, "name": name} for sid, name in SERVICE_CATALOG.items()]
