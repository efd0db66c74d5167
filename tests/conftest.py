# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Updated: 2026-01-22
# Description: conftest.py
# -----------------------------------------------------------------------------

import hashlib
import math
import os
import re
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# keep test runs from writing rotating log files
os.environ.setdefault("MEETING_LOG_TO_FILE", "0")

from chunking.TranscriptChunker import TranscriptChunker  # noqa: E402
from embedding.DimensionAdapter import DimensionAdapter  # noqa: E402
from embedding.MeetingEmbedder import MeetingEmbedder  # noqa: E402
from insights.types import MeetingInsights, MeetingMetadata  # noqa: E402
from services.ContextRetrievalService import ContextRetrievalService  # noqa: E402
from services.MeetingIndexService import MeetingIndexService  # noqa: E402
from services.MeetingPipelineService import MeetingPipelineService  # noqa: E402
from services.MetadataExtractionService import MetadataExtractionService  # noqa: E402
from vectorstore.IndexRecord import IndexRecord, VectorMatch  # noqa: E402

TEST_DIM = 8
_WORD = re.compile(r"[a-z0-9]+")


def hashed_vector(text: str, dim: int) -> List[float]:
    """Bag-of-words hashing embedding: texts sharing words end up close."""
    vec = [0.0] * dim
    for word in _WORD.findall((text or "").lower()):
        bucket = int(hashlib.md5(word.encode("utf-8")).hexdigest(), 16) % dim
        vec[bucket] += 1.0
    norm = math.sqrt(sum(v * v for v in vec))
    if norm == 0:
        vec[0] = 1.0
        return vec
    return [v / norm for v in vec]


class FakeRemoteEmbeddingProvider:
    def __init__(self, dim: int = TEST_DIM, fail_at: Optional[int] = None, always_fail: bool = False):
        self.dim = dim
        self.fail_at = fail_at
        self.always_fail = always_fail
        self.calls: List[str] = []

    def embed_text(self, text: str) -> List[float]:
        self.calls.append(text)
        if self.always_fail or (self.fail_at is not None and len(self.calls) - 1 == self.fail_at):
            raise ConnectionError("remote embeddings unavailable")
        return hashed_vector(text, self.dim)


class FakeLocalEmbeddingProvider:
    def __init__(self, dim: int = 4, fail: bool = False):
        self.dim = dim
        self.fail = fail
        self.batches: List[List[str]] = []

    def embed(self, texts: Sequence[str]) -> List[List[float]]:
        self.batches.append(list(texts))
        if self.fail:
            raise RuntimeError("local model failed to load")
        return [hashed_vector(t, self.dim) for t in texts]


class RecordingVectorStore:
    """
    In-memory MeetingVectorStore that records every query it serves.
    Cosine similarity over stored vectors; namespaces are plain dict keys.
    """

    def __init__(self) -> None:
        self.namespaces: Dict[str, Dict[str, IndexRecord]] = {}
        self.queries: List[Dict[str, Any]] = []
        self.upserts: List[Dict[str, Any]] = []
        self.fail_upsert = False

    def test_connection(self) -> bool:
        return True

    def upsert(self, namespace: str, records: Sequence[IndexRecord]) -> int:
        if self.fail_upsert:
            raise ConnectionError("vector store unavailable")
        self.upserts.append({"namespace": namespace, "ids": [r.id for r in records]})
        bucket = self.namespaces.setdefault(namespace, {})
        for rec in records:
            bucket[rec.id] = rec
        return len(records)

    def query(self, vector, *, top_k=5, namespace=None, where=None) -> List[VectorMatch]:
        self.queries.append({"namespace": namespace, "where": dict(where) if where else None, "top_k": top_k})

        if namespace is None:
            pools = list(self.namespaces.values())
        else:
            pools = [self.namespaces.get(namespace, {})]

        scored = []
        for pool in pools:
            for rec in pool.values():
                if where and any(rec.metadata.get(k) != v for k, v in where.items()):
                    continue
                if len(rec.vector) != len(vector):
                    raise ValueError("dimension mismatch in store")
                score = sum(a * b for a, b in zip(rec.vector, vector))
                scored.append(VectorMatch(id=rec.id, score=score, metadata=dict(rec.metadata)))

        scored.sort(key=lambda m: m.score, reverse=True)
        return scored[:top_k]

    def count(self, namespace=None) -> int:
        if namespace is None:
            return sum(len(p) for p in self.namespaces.values())
        return len(self.namespaces.get(namespace, {}))

    def delete_namespace(self, namespace: str) -> int:
        return len(self.namespaces.pop(namespace, {}))


class ScriptedInsightsProvider:
    name = "scripted"

    def __init__(
        self,
        metadata: Optional[MeetingMetadata] = None,
        insights: Optional[MeetingInsights] = None,
        metadata_error: Optional[Exception] = None,
        insights_error: Optional[Exception] = None,
    ):
        self.metadata = metadata
        self.insights = insights or MeetingInsights(overview="Nothing decided.")
        self.metadata_error = metadata_error
        self.insights_error = insights_error
        self.prompts: List[str] = []

    def extract_metadata(self, transcript: str) -> MeetingMetadata:
        if self.metadata_error:
            raise self.metadata_error
        return self.metadata or MeetingMetadata.defaults_for(transcript)

    def generate_insights(self, transcript: str, system_prompt: str) -> MeetingInsights:
        self.prompts.append(system_prompt)
        if self.insights_error:
            raise self.insights_error
        return self.insights


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2026, 1, 20, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture
def store() -> RecordingVectorStore:
    return RecordingVectorStore()


@pytest.fixture
def remote_provider() -> FakeRemoteEmbeddingProvider:
    return FakeRemoteEmbeddingProvider()


@pytest.fixture
def local_provider() -> FakeLocalEmbeddingProvider:
    return FakeLocalEmbeddingProvider()


@pytest.fixture
def embedder(remote_provider, local_provider) -> MeetingEmbedder:
    return MeetingEmbedder(primary=remote_provider, fallback=local_provider)


@pytest.fixture
def adapter() -> DimensionAdapter:
    return DimensionAdapter(target_dim=TEST_DIM, policy="pad_truncate")


@pytest.fixture
def chunker() -> TranscriptChunker:
    return TranscriptChunker(chunk_size_chars=120, overlap_chars=20)


@pytest.fixture
def index_service(store, embedder, adapter, chunker) -> MeetingIndexService:
    return MeetingIndexService(store=store, embedder=embedder, adapter=adapter, chunker=chunker)


@pytest.fixture
def retrieval_service(store, embedder, adapter) -> ContextRetrievalService:
    return ContextRetrievalService(store=store, embedder=embedder, adapter=adapter, default_top_k=5)


@pytest.fixture
def make_pipeline(index_service, retrieval_service):
    def _make(provider, clock=None) -> MeetingPipelineService:
        return MeetingPipelineService(
            metadata_service=MetadataExtractionService(provider=provider),
            index_service=index_service,
            retrieval_service=retrieval_service,
            provider=provider,
            clock=clock or StepClock(),
        )

    return _make
