# Author: Bradley R. Kinnard — the app's pulse check

"""Health and /metrics. Nothing behind us to ping, so health reports what a /strip call would run with."""

from fastapi import APIRouter, Request, Response

from src.jaxbstrip.adapters.metrics_client import get_metrics
from src.jaxbstrip.api.schemas import HealthResponse
from src.jaxbstrip.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    s = get_settings()
    return HealthResponse(
        status="ok",
        request_id=getattr(request.state, "request_id", "unknown"),
        version=request.app.version,
        max_payload_bytes=s.max_payload_bytes,
    )


@router.get("/metrics")
def metrics() -> Response:
    return Response(content=get_metrics(), media_type="text/plain; charset=utf-8")
