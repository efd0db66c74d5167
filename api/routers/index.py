# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: index router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

import settings
from api.dependencies import get_index_service
from api.errors import http_error
from api.schemas.index import IndexRequest, IndexResponse
from services.MeetingIndexService import MeetingIndexService
from utility.time_utils import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/index", tags=["index"])


@router.post("", response_model=IndexResponse)
def index_documents(
    req: IndexRequest,
    svc: MeetingIndexService = Depends(get_index_service),
) -> IndexResponse:
    project_name = (req.project_name or "").strip() or settings.DEFAULT_PROJECT_NAME
    department = (req.department or "").strip() or settings.DEFAULT_DEPARTMENT
    date_iso = (req.date_iso or "").strip() or utc_now_iso()

    logger.info(
        "POST /index called (documents=%d project=%r department=%r)",
        len(req.documents),
        project_name,
        department,
    )
    try:
        count = svc.index(
            req.documents,
            project_name=project_name,
            department=department,
            date_iso=date_iso,
        )
    except Exception as e:
        raise http_error(e, "Indexing") from e

    return IndexResponse(
        ok=True,
        count=count,
        project_name=project_name,
        department=department,
        date_iso=date_iso,
    )
