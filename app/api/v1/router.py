"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from app.api.v1 import asq, health

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# ASQ-3 screening calculations
api_router.include_router(
    asq.router,
    prefix="/asq",
    tags=["asq"],
)
