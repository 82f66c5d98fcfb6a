from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from crm.api.dependencies import get_store
from crm.config import settings
from crm.ingest.webhook import InvalidPayloadError, ingest_submission, parse_webhook_body
from crm.schemas.booking_schema import WebhookAck
from crm.store.record_store import RecordStore
from crm.utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def receive_webhook(request: Request, store: RecordStore = Depends(get_store)):
    """
    Accept a booking form submission (JSON or form-encoded, any field naming).
    The form system retries failed deliveries; nothing is retried here.
    """
    body = await request.body()
    try:
        payload = parse_webhook_body(request.headers.get("content-type"), body)
    except InvalidPayloadError as exc:
        logger.warning("Rejected webhook body: %s", exc)
        return JSONResponse(status_code=400, content={"error": "Invalid request format"})

    logger.info("Webhook received with %d fields", len(payload))
    logger.debug("Webhook payload: %s", payload)

    try:
        # Ingestion takes the store lock; keep it off the event loop
        result = await run_in_threadpool(ingest_submission, store, payload)
    except Exception as exc:
        logger.exception("Webhook processing failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process booking", "details": str(exc)},
        )

    ack = WebhookAck(
        success=True,
        message="Booking received",
        booking_id=result.booking.id,
        customer_id=result.customer.id,
    )
    return ack.model_dump(by_alias=True)


@router.get("")
def webhook_info():
    """Liveness and usage hint for whoever configures the form integration."""
    return {
        "status": "ok",
        "message": f"{settings.business.name} CRM Webhook",
        "usage": "POST form data to this endpoint",
        "timestamp": utc_now().isoformat(),
    }
