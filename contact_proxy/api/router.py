from fastapi import APIRouter

from contact_proxy.api.routes.contact import router as contact_router
from contact_proxy.api.routes.health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(contact_router, tags=["contact"])
