# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-15
# Description: DimensionAdapter
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, List, Sequence

import settings
from utility.logging_utils import get_class_logger

PAD_TRUNCATE = "pad_truncate"
STRICT = "strict"


def adapt_vector(vector: Sequence[float], target_dim: int) -> List[float]:
    """
    Reconcile a vector with the store dimension: truncate to the first
    `target_dim` components, or right-pad with zeros. No renormalisation.
    """
    if target_dim <= 0:
        raise ValueError(f"target_dim must be positive, got {target_dim}")

    values = [float(v) for v in vector]
    if len(values) >= target_dim:
        return values[:target_dim]
    return values + [0.0] * (target_dim - len(values))


@dataclass
class DimensionAdapter:
    """
    Applied to indexed vectors and query vectors alike, so every vector the
    store sees has exactly `target_dim` components.
    """

    target_dim: int = settings.VECTOR_TARGET_DIM
    policy: str = settings.DIMENSION_POLICY
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        if self.target_dim <= 0:
            raise ValueError(f"target_dim must be positive, got {self.target_dim}")
        if self.policy not in (PAD_TRUNCATE, STRICT):
            raise ValueError(f"Unknown dimension policy {self.policy!r}")

    def adapt(self, vector: Sequence[float]) -> List[float]:
        if len(vector) == self.target_dim:
            return [float(v) for v in vector]

        if self.policy == STRICT:
            raise ValueError(
                f"Embedding dimension {len(vector)} does not match store dimension {self.target_dim}"
            )
        return adapt_vector(vector, self.target_dim)

    def adapt_many(self, vectors: Sequence[Sequence[float]]) -> List[List[float]]:
        mismatched = {len(v) for v in vectors if len(v) != self.target_dim}
        if mismatched:
            self.logger.warning(
                "Adapting embedding dimensions from %s to %d (policy=%s)",
                sorted(mismatched),
                self.target_dim,
                self.policy,
            )
        return [self.adapt(v) for v in vectors]
