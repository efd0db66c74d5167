# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-13
# Description: MeetingChunk
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MeetingChunk:
    """
    A contiguous segment of a meeting transcript (or of generated insights),
    tagged with the project/department/date it will be indexed under.
    Immutable once created.
    """

    text: str
    index: int
    project_name: str
    department: str
    date_iso: str

    # Offsets into the source text (end is exclusive)
    char_start: int = 0
    char_end: int = 0

    def to_metadata(self) -> Dict[str, Any]:
        """Metadata stored next to the vector; keys are what the retrieval filters use."""
        return {
            "project_name": self.project_name,
            "department": self.department,
            "date": self.date_iso,
            "chunk_index": self.index,
            "text": self.text,
        }
