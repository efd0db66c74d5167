# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: errors.py
# -----------------------------------------------------------------------------
import logging

from fastapi import HTTPException

from utility.errors import ConfigurationError, PipelineStageError

logger = logging.getLogger(__name__)


def http_error(e: Exception, action: str) -> HTTPException:
    """Map a service-layer exception onto the HTTP status the API reports."""
    if isinstance(e, PipelineStageError):
        stage = getattr(e.stage, "value", e.stage)
        # an unconfigured provider is a deployment problem, not an upstream one
        status = 503 if isinstance(e.cause, ConfigurationError) else 502
        logger.error("%s failed at stage '%s': %s", action, stage, e.cause)
        return HTTPException(status_code=status, detail={"stage": stage, "error": str(e.cause)})

    if isinstance(e, ConfigurationError):
        logger.error("%s unavailable, missing configuration %s", action, list(e.missing))
        return HTTPException(status_code=503, detail=f"{action} unavailable: {e}")

    if isinstance(e, ValueError):
        return HTTPException(status_code=400, detail=str(e))

    logger.exception("%s failed: %s", action, e)
    return HTTPException(status_code=500, detail=f"{action} failed: {e}")
