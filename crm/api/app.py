from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crm.api.router import api_router
from crm.config import AppConfig, settings
from crm.logging_context import get_request_id, new_request_id, set_request_id
from crm.store.record_store import RecordStore
from crm.store.seed import load_seed

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def build_store(config: AppConfig = settings) -> RecordStore:
    """Create the process-wide store, seeded once if enabled."""
    store = RecordStore()
    if config.store.seed_enabled:
        load_seed(store, config.store.seed_path)
    return store


def create_app(store: Optional[RecordStore] = None, config: AppConfig = settings) -> FastAPI:
    app = FastAPI(title=f"{config.business.name} CRM", version=config.version)
    app.state.store = store if store is not None else build_store(config)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        set_request_id(request_id)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    # Runs outside the middleware stack, so the request id is set here too
    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        request_id = request.headers.get(REQUEST_ID_HEADER) or get_request_id()
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers={REQUEST_ID_HEADER: request_id},
        )

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "service": f"{config.business.name} CRM",
            "version": app.version,
        }

    app.include_router(api_router, prefix="/api")
    logger.info("%s CRM v%s ready", config.business.name, app.version)
    return app
