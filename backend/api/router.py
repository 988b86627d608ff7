"""Aggregates all API routers into a single router."""

from fastapi import APIRouter

from backend.api.health import router as health_router
from backend.api.uploads import router as uploads_router

api_router = APIRouter(prefix="/api")


@api_router.get("", tags=["health"])
async def api_root():
    return {"ok": True, "message": "API root"}


api_router.include_router(health_router)
api_router.include_router(uploads_router)
