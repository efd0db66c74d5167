# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: retrieve.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RetrieveRequest(BaseModel):
    project_name: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    search_query: str = Field(..., min_length=1)
    k: int = Field(5, ge=1, le=50)


class RetrieveMatch(BaseModel):
    id: str
    score: Optional[float] = None
    text: str
    metadata: Dict[str, Any]


class RetrieveResponse(BaseModel):
    context: str
    strategy: Optional[str] = None     # None when every strategy came back empty
    matches: List[RetrieveMatch]
