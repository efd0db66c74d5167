# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-21
# Description: health.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_health_service
from api.errors import http_error
from api.schemas.health import DeepHealthResponse, HealthResponse
from services.MeetingHealthService import MeetingHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="Meeting RAG API running")


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    run_chat: bool = Query(True, description="Also ping the chat deployment"),
    svc: MeetingHealthService = Depends(get_health_service),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (run_chat=%s)", run_chat)
    try:
        result = svc.deep_health(run_chat=run_chat)
    except Exception as e:
        raise http_error(e, "Deep health check") from e

    logger.info("GET /health/deep completed: %s", result.status)
    return result
