"""
Customer deduplication for incoming submissions.

Lookup order is phone first, then case-insensitive name. Phone wins
because it is more stable than free-text names; as a consequence two
people sharing a household line resolve to one customer.
"""

import logging

from crm.ingest.field_normalizer import NormalizedSubmission
from crm.schemas.customer_schema import Customer, CustomerCreate
from crm.store.record_store import RecordStore
from crm.utils import utc_now

logger = logging.getLogger(__name__)


def merge_submission(customer: Customer, submission: NormalizedSubmission) -> None:
    """Fold a submission into an existing customer.

    Only the vehicle list (append if novel) and an empty email are touched.
    """
    if submission.vehicle and submission.vehicle not in customer.vehicles:
        customer.vehicles.append(submission.vehicle)
        logger.debug("Added vehicle %r to customer %s", submission.vehicle, customer.id)
    if submission.email and not customer.email:
        customer.email = submission.email
        logger.debug("Backfilled email for customer %s", customer.id)


def find_or_create_customer(
    store: RecordStore, submission: NormalizedSubmission
) -> tuple[Customer, bool]:
    """Resolve a submission to a customer, creating one if nothing matches.

    Returns the customer and whether it was newly created.
    """
    with store.lock:
        customer = store.find_customer_by_phone(submission.phone)
        matched_by = "phone"
        if customer is None:
            customer = store.find_customer_by_name(submission.name)
            matched_by = "name"

        if customer is not None:
            merge_submission(customer, submission)
            logger.info("Returning customer %s matched by %s", customer.id, matched_by)
            return customer, False

        now = utc_now()
        customer = store.add_customer(
            CustomerCreate(
                name=submission.name,
                phone=submission.phone,
                email=submission.email,
                zip_code=submission.zip_code,
                vehicles=[submission.vehicle] if submission.vehicle else [],
                first_visit=now,
                last_visit=now,
            )
        )
        return customer, True
