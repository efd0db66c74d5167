# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: retrieve router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_retrieval_service
from api.errors import http_error
from api.schemas.retrieve import RetrieveMatch, RetrieveRequest, RetrieveResponse
from services.ContextRetrievalService import ContextRetrievalService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/retrieve", tags=["retrieve"])


@router.post("", response_model=RetrieveResponse)
def retrieve_context(
    req: RetrieveRequest,
    svc: ContextRetrievalService = Depends(get_retrieval_service),
) -> RetrieveResponse:
    try:
        outcome = svc.retrieve_matches(req.project_name, req.department, req.search_query, req.k)
    except Exception as e:
        raise http_error(e, "Retrieval") from e

    logger.info("POST /retrieve: strategy=%s matches=%d", outcome.strategy, len(outcome.matches))
    return RetrieveResponse(
        context=svc.format_context(outcome.matches),
        strategy=outcome.strategy,
        matches=[
            RetrieveMatch(id=m.id, score=m.score, text=m.text, metadata=m.metadata)
            for m in outcome.matches
        ],
    )
