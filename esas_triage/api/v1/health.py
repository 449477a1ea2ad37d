"""Health check endpoints."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from esas_triage.knowledge import KnowledgeBaseError, get_knowledge_base

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    knowledge_base_version: str | None = None


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns readiness once the knowledge base has loaded",
)
async def readiness_check() -> HealthResponse:
    """Check if the service is ready to accept screenings.

    Returns:
        Readiness status with the loaded knowledge base version
    """
    try:
        knowledge_base = get_knowledge_base()
    except KnowledgeBaseError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Knowledge base unavailable: {e}",
        ) from e

    return HealthResponse(status="ok", knowledge_base_version=knowledge_base.version)
