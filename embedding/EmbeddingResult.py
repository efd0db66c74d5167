# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-14
# Description: EmbeddingResult
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class EmbeddingResult:
    """Outcome of one embedding attempt: vectors on success, the error otherwise."""

    vectors: List[List[float]] = field(default_factory=list)
    error: Optional[BaseException] = None
    failed_index: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, vectors: List[List[float]]) -> "EmbeddingResult":
        return cls(vectors=vectors)

    @classmethod
    def failure(cls, error: BaseException, failed_index: Optional[int] = None) -> "EmbeddingResult":
        return cls(error=error, failed_index=failed_index)
