"""Health check and metrics endpoints"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from portfolio.api.dependencies import get_project_store
from portfolio.services.project_store import ProjectStore

router = APIRouter(tags=["Health"])

API_VERSION = "1.0.0"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def basic_health_check():
    """
    Basic health check endpoint

    Returns simple health status and timestamp
    """
    return {
        "status": "healthy",
        "timestamp": _timestamp()
    }


@router.get("/api/health", status_code=status.HTTP_200_OK)
async def detailed_health_check(store: ProjectStore = Depends(get_project_store)):
    """
    Detailed health check with project store status

    Reports the configured store backend, its mode (online/offline) and
    whether it is reachable
    """
    overall_status = "healthy"

    try:
        await store.ping()
        store_status = "connected"
    except Exception as e:
        store_status = f"disconnected: {str(e)}"
        overall_status = "degraded"

    return {
        "status": overall_status,
        "version": API_VERSION,
        "timestamp": _timestamp(),
        "services": {
            "store": store_status,
        },
        "store": {
            "backend": store.backend_name,
            "mode": store.mode.value,
        },
    }


@router.get("/metrics")
async def metrics():
    """Prometheus metrics in text exposition format"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
