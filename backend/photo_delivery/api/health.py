"""Health check endpoint."""

import time
from fastapi import APIRouter

from photo_delivery.models.responses import HealthResponse
from photo_delivery.validators import validation_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check. The validator has no external dependencies to probe."""
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
        rule_count=len(validation_engine.validators),
    )
