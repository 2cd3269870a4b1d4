"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from app.api.deps import CutoffTableDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy.

    Returns:
        Health status response
    """
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns service readiness status for k8s probes",
)
async def readiness_check(table: CutoffTableDep) -> HealthResponse:
    """Check if the service is ready to accept requests.

    Resolving the cutoff table dependency fails the probe when the
    configured table cannot be loaded.

    Returns:
        Readiness status response
    """
    return HealthResponse(status="ok")
