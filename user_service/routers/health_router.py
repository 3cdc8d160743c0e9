"""
Health check and monitoring router.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from ..dependencies import get_store
from ..metrics import metrics_response
from ..models import HealthResponse
from ..store.base import KeyValueStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, store: KeyValueStore = Depends(get_store)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        service=request.app.state.settings.SERVICE_NAME,
        version="1.0.0",
        timestamp=datetime.now(timezone.utc).isoformat(),
        cache_entries=store.size(),
    )


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return metrics_response()
