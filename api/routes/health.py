"""Health check route; the only path served without authentication"""

from fastapi import APIRouter, Request
import logging

from api.responses import HealthResponse

router = APIRouter(tags=["Health"])
logger = logging.getLogger("pantrykeeper.api.health")


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    """Basic liveness check endpoint"""
    settings = request.app.state.settings
    return HealthResponse(
        status="ok", service=settings.app_name, version=settings.app_version
    )
