# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-01-15
# Description: MeetingEmbedder
# -----------------------------------------------------------------------------
import logging
from typing import List, Optional, Sequence

from embedding.EmbeddingProvider import LocalEmbeddingProvider, RemoteEmbeddingProvider
from embedding.EmbeddingResult import EmbeddingResult
from utility.logging_utils import get_class_logger


class MeetingEmbedder:
    """
    Turns texts into vectors, one per input, order preserved.

    The primary (remote) provider is called sequentially, one text at a time.
    The first failure abandons the whole primary attempt and the batch is
    re-embedded by the local fallback. Primary errors are logged, not raised;
    a fallback error propagates to the caller.
    """

    def __init__(
        self,
        *,
        fallback: LocalEmbeddingProvider,
        primary: Optional[RemoteEmbeddingProvider] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.logger = logger or get_class_logger(self.__class__)

    def _embed_primary(self, texts: Sequence[str]) -> EmbeddingResult:
        vectors: List[List[float]] = []
        for i, text in enumerate(texts):
            try:
                vectors.append(self.primary.embed_text(text))
            except Exception as e:
                return EmbeddingResult.failure(e, failed_index=i)
        return EmbeddingResult.success(vectors)

    def _embed_fallback(self, texts: Sequence[str]) -> List[List[float]]:
        vectors = self.fallback.embed(texts)
        if len(vectors) != len(texts):
            raise ValueError(f"Fallback embedding count mismatch: {len(vectors)} != {len(texts)}")
        return vectors

    def embed_texts(self, texts: Sequence[str]) -> List[List[float]]:
        items = list(texts)
        if not items:
            return []

        if self.primary is None:
            self.logger.info("No remote embedding provider configured; using local model (texts=%d)", len(items))
            return self._embed_fallback(items)

        self.logger.info("Embedding %d texts with %s", len(items), type(self.primary).__name__)
        result = self._embed_primary(items)
        if result.ok:
            return result.vectors

        self.logger.warning(
            "Remote embeddings failed at text %s/%d, falling back to local embeddings: %s",
            result.failed_index,
            len(items),
            result.error,
        )
        return self._embed_fallback(items)

    def embed_query(self, text: str) -> List[float]:
        return self.embed_texts([text])[0]
