"""Health check endpoints.

Mounted at the application root so load balancers do not need the API
prefix.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field

from recipe_service.core.config import Settings, get_settings


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(HealthResponse):
    """Readiness check response with dependency status."""

    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of dependencies",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive. Dependencies are not checked."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Reports whether the recipe source was initialized.",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ORJSONResponse:
    """Check if the service is ready to handle requests."""
    repository = getattr(request.app.state, "recipe_repository", None)
    ready = repository is not None
    body = ReadinessResponse(
        status="ready" if ready else "not_ready",
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies={
            "recipe_source": repository.source_name if ready else "unavailable",
        },
    )
    return ORJSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
