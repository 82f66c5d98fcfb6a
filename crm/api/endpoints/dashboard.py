from __future__ import annotations

from fastapi import APIRouter, Depends

from crm.api.dependencies import get_store
from crm.ingest.services import get_all_services
from crm.schemas.stats_schema import DashboardStats
from crm.stats import compute_stats
from crm.store.record_store import RecordStore

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(store: RecordStore = Depends(get_store)):
    """Full dashboard snapshot, rebuilt from the store on every call."""
    return compute_stats(store)


@router.get("/services")
def service_catalog():
    """Services the booking form can tick, in display order."""
    return get_all_services()
