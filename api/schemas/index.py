# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: index.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel, Field


class IndexRequest(BaseModel):
    documents: List[str] = Field(..., min_length=1)
    project_name: Optional[str] = None      # default "General Discussion"
    department: Optional[str] = None        # default "General"
    date_iso: Optional[str] = None          # default now (UTC)


class IndexResponse(BaseModel):
    ok: bool
    count: int
    project_name: str
    department: str
    date_iso: str
