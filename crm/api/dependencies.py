from __future__ import annotations

from fastapi import Request

from crm.store.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """The store owned by the running application."""
    return request.app.state.store
