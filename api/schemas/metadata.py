# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: metadata.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel, Field


class MetadataRequest(BaseModel):
    transcript: str = Field(..., min_length=1)
