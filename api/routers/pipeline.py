# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: pipeline router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_pipeline_service
from api.errors import http_error
from api.schemas.pipeline import PipelineRequest, PipelineResponse
from services.MeetingPipelineService import MeetingPipelineService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pipeline", tags=["pipeline"])


@router.post("", response_model=PipelineResponse)
def run_pipeline(
    req: PipelineRequest,
    svc: MeetingPipelineService = Depends(get_pipeline_service),
) -> PipelineResponse:
    logger.info("POST /pipeline called (transcript_len=%d top_k=%s)", len(req.transcript), req.top_k)
    try:
        result = svc.run(req.transcript, system_prompt=req.system_prompt, top_k=req.top_k)
    except Exception as e:
        raise http_error(e, "Pipeline") from e

    return PipelineResponse(**result.to_dict())
