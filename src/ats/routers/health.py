"""Health check route."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()

_STARTED_AT = time.monotonic()


@router.get("/health")
def health() -> dict:
    """Liveness probe for the load balancer and monitoring."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
    }
