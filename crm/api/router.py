from fastapi import APIRouter

from crm.api.endpoints import bookings
from crm.api.endpoints import customers
from crm.api.endpoints import dashboard
from crm.api.endpoints import webhook

api_router = APIRouter()

api_router.include_router(webhook.router, prefix="/webhook", tags=["webhook"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(dashboard.router, tags=["dashboard"])
