"""Liveness probe for the load balancer."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from faf.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(
    http_request: Request, settings: FromDishka[Settings]
) -> HealthResponse:
    """Report that the API is serving. The database is not consulted."""
    return HealthResponse(
        status="healthy",
        service=http_request.app.title,
        version=http_request.app.version,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
    )
