"""Health endpoints: service info, liveness and pipeline readiness."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from src.config import settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Service identity and uptime snapshot."""

    status: str
    service: str
    timestamp: datetime
    version: str
    environment: str
    meetings: int = Field(default=0, description="Meetings held in memory")
    processing: bool = Field(default=False, description="True while any meeting is processing")


class LivenessResponse(BaseModel):
    status: str


class ReadinessResponse(BaseModel):
    """Readiness verdict plus one entry per dependency check."""

    status: str
    checks: dict[str, str]


@router.get("/", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report service identity and how much work is held in memory."""
    store = getattr(request.app.state, "meeting_store", None)
    pipeline = getattr(request.app.state, "pipeline", None)
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        timestamp=datetime.now(UTC),
        version=settings.app_version,
        environment=settings.app_env,
        meetings=len(store) if store is not None else 0,
        processing=pipeline.processing if pipeline is not None else False,
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe: the event loop is serving requests."""
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request) -> ReadinessResponse:
    """Readiness probe - app can process meetings.

    Checks:
    - API is responding
    - Meeting store and pipeline are initialized
    - Transcription and extraction services have credentials
    """
    checks: dict[str, str] = {"api": "ok"}

    store = getattr(request.app.state, "meeting_store", None)
    checks["store"] = "ok" if store is not None else "not_configured"

    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        checks["transcription"] = "not_configured"
        checks["extraction"] = "not_configured"
    else:
        checks["transcription"] = "ok" if pipeline.transcriber.configured else "not_configured"
        checks["extraction"] = "ok" if pipeline.extractor.configured else "not_configured"

    status = "ready" if all(v == "ok" for v in checks.values()) else "not_ready"
    return ReadinessResponse(status=status, checks=checks)
