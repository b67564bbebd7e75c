"""Health endpoint for load balancers and uptime checks."""

from typing import Any

from fastapi import APIRouter, Depends

from ...api.dependencies import get_settings
from ...config import Settings

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/healthz")
def healthcheck(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Return coarse-grained readiness information."""

    return {
        "status": "ok",
        "environment": settings.environment,
        "storageBackend": settings.storage_backend,
        "pageSize": settings.page_size,
    }
