from crm.ingest.field_normalizer import FIELD_ALIASES, NormalizedSubmission, normalize_submission
from crm.ingest.resolver import find_or_create_customer
from crm.ingest.services import SERVICE_CATALOG, extract_services
from crm.ingest.webhook import InvalidPayloadError, ingest_submission, parse_webhook_body

__all__ = [
    "FIELD_ALIASES", "NormalizedSubmission", "normalize_submission",
    "find_or_create_customer",
    "SERVICE_CATALOG", "extract_services",
    "InvalidPayloadError", "ingest_submission", "parse_webhook_body",
]
