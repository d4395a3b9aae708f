"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_todo_service
from core.config import settings
from core.exceptions import StorageUnavailableError
from domain.services.todo_service import TodoService

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    storage: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without touching the todo file.
    """
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    service: TodoService = Depends(get_todo_service),
) -> HealthResponse:
    """Health check that also reads and parses the todo file."""
    try:
        await service.list_todos()
        storage_status = "healthy"
    except StorageUnavailableError as e:
        storage_status = f"unhealthy: {e.details['reason']}"

    return HealthResponse(
        status="healthy" if storage_status == "healthy" else "degraded",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        storage=storage_status,
    )
