# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: metadata router
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends

from api.dependencies import get_metadata_service
from api.errors import http_error
from api.schemas.pipeline import MetadataModel
from api.schemas.metadata import MetadataRequest
from services.MetadataExtractionService import MetadataExtractionService

router = APIRouter(prefix="/metadata", tags=["metadata"])


@router.post("", response_model=MetadataModel)
def extract_metadata(
    req: MetadataRequest,
    svc: MetadataExtractionService = Depends(get_metadata_service),
) -> MetadataModel:
    try:
        metadata = svc.extract(req.transcript)
    except Exception as e:
        raise http_error(e, "Metadata extraction") from e
    return MetadataModel(**metadata.to_dict())
