"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from esas_triage.api.v1 import health, screenings

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# ESAS screening
api_router.include_router(
    screenings.router,
    tags=["screenings"],
)
