# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-16
# Description: IndexRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from chunking.MeetingChunk import MeetingChunk


@dataclass(frozen=True)
class IndexRecord:
    """Embedding vector + searchable metadata, keyed by a deterministic id."""

    id: str
    vector: List[float]
    metadata: Dict[str, Any]

    @staticmethod
    def make_id(project_name: str, date_iso: str, chunk_index: int) -> str:
        # same project/date/index -> same id, so re-indexing overwrites
        return f"{project_name}-{date_iso}-{chunk_index}"

    @classmethod
    def from_chunk(cls, chunk: MeetingChunk, vector: List[float]) -> "IndexRecord":
        return cls(
            id=cls.make_id(chunk.project_name, chunk.date_iso, chunk.index),
            vector=list(vector),
            metadata=chunk.to_metadata(),
        )


@dataclass(frozen=True)
class VectorMatch:
    """One ranked query hit. `score` is a similarity: higher is closer."""

    id: str
    score: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return str(self.metadata.get("text") or "")
