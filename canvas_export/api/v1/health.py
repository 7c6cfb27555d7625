"""
Liveness and readiness probes.

Exports are pure computation, so the project store is the only dependency a
readiness check can fail on.
"""
import time
from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from canvas_export.config import settings
from canvas_export.services.project_store import ProjectStore, get_project_store
from canvas_export.utils.datetime_utils import to_iso_string
from canvas_export.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)

STARTED_AT = time.monotonic()


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


class ReadinessResponse(BaseModel):
    status: str
    ready: bool
    service: str
    version: str
    uptime_seconds: float
    dependencies: Dict[str, str]
    timestamp: str


@router.get("/health/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    return LivenessResponse(status="alive", timestamp=to_iso_string())


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness(store: ProjectStore = Depends(get_project_store)) -> ReadinessResponse:
    try:
        await store.list_projects()
        store_status = "healthy"
    except Exception as e:
        logger.warning("health.store.unavailable", extra={"error_type": type(e).__name__})
        store_status = "unhealthy"

    ready = store_status == "healthy"
    return ReadinessResponse(
        status="ready" if ready else "not_ready",
        ready=ready,
        service=settings.app_name,
        version=settings.app_version,
        uptime_seconds=round(time.monotonic() - STARTED_AT, 3),
        dependencies={"project_store": store_status},
        timestamp=to_iso_string(),
    )
