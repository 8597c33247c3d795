"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from loan_gateway import __version__
from loan_gateway.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(service=settings.app_name, version=__version__)
