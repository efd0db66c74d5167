# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: pipeline.py
# -----------------------------------------------------------------------------
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class PipelineRequest(BaseModel):
    transcript: str = Field(..., min_length=1)
    system_prompt: Optional[str] = None
    top_k: Optional[int] = Field(None, ge=1, le=50)


class MetadataModel(BaseModel):
    project_name: str
    department: str
    search_string: str


class ToDoItemModel(BaseModel):
    person: str
    task: str
    type: Literal["takeaway", "action"]


class InsightsModel(BaseModel):
    overview: str
    to_do_list: List[ToDoItemModel]


class PipelineResponse(BaseModel):
    metadata: MetadataModel
    context: str
    context_strategy: Optional[str] = None
    insights: InsightsModel
    stored_chunks: int
    stored_insight_chunks: int
