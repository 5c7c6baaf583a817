"""Liveness endpoint."""

import time

from fastapi import APIRouter

from climatrack.config.settings import get_settings

health_router = APIRouter(tags=["Health"])


@health_router.get("/health")
async def health() -> dict:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "timestamp": time.time(),
    }
