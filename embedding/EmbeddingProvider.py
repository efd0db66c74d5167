# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-14
# Description: EmbeddingProvider
# -----------------------------------------------------------------------------

from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RemoteEmbeddingProvider(Protocol):
    """One network call per text; raises on auth, transport or malformed responses."""

    def embed_text(self, text: str) -> List[float]:
        ...


@runtime_checkable
class LocalEmbeddingProvider(Protocol):
    """In-process model, no network dependency."""

    def embed(self, texts: Sequence[str]) -> List[List[float]]:
        ...
