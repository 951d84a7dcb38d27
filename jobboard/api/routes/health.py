from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from jobboard.config import settings


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class StoreHealthStatus(BaseModel):
    status: str
    job_count: int
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/store", response_model=StoreHealthStatus, summary="Job store check")
def store_health_check(request: Request) -> StoreHealthStatus:
    store = getattr(request.app.state, "job_store", None)
    job_count = len(store) if store is not None else 0
    return StoreHealthStatus(
        status="ok" if job_count else "empty",
        job_count=job_count,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/config", summary="Debug: show selected runtime config")
def config_debug():
    if not settings.debug:
        # Avoid exposing runtime config in production.
        return {"detail": "Not Found"}

    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "api_prefix": settings.api_prefix,
        "log_level": settings.log_level,
        "simulated_latency_ms": settings.simulated_latency_ms,
        "cors_origins": settings.cors_origins,
    }
