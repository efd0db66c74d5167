# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Updated: 2026-01-19
# Description: MeetingIndexService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import List, Sequence

from chunking.MeetingChunk import MeetingChunk
from chunking.TranscriptChunker import TranscriptChunker
from embedding.DimensionAdapter import DimensionAdapter
from embedding.MeetingEmbedder import MeetingEmbedder
from insights.types import MeetingInsights
from utility.logging_utils import get_class_logger
from vectorstore.IndexRecord import IndexRecord
from vectorstore.MeetingVectorStore import MeetingVectorStore


class MeetingIndexService:
    """
    Owns the index pipeline:
      - chunk (transcripts only; insights are already short texts)
      - embed (remote, falling back to local)
      - adapt each vector to the store dimension
      - upsert into the vector store under namespace = project name
    """

    def __init__(
        self,
        *,
        store: MeetingVectorStore,
        embedder: MeetingEmbedder,
        adapter: DimensionAdapter,
        chunker: TranscriptChunker | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.adapter = adapter
        self.chunker = chunker or TranscriptChunker()
        self.logger = logger or get_class_logger(self.__class__)

    def index_chunks(self, chunks: Sequence[MeetingChunk]) -> int:
        """
        Embed + upsert pre-built chunks. All chunks must share one project,
        since the project is the namespace. Upsert errors propagate.
        """
        items = list(chunks)
        if not items:
            self.logger.info("No chunks to index")
            return 0

        namespaces = {c.project_name for c in items}
        if len(namespaces) != 1:
            raise ValueError(f"Chunks span several projects {sorted(namespaces)}; index them separately")
        namespace = items[0].project_name

        vectors = self.embedder.embed_texts([c.text for c in items])
        if len(vectors) != len(items):
            raise ValueError(f"Embedding count mismatch: {len(vectors)} != {len(items)}")

        adapted = self.adapter.adapt_many(vectors)
        records = [IndexRecord.from_chunk(c, v) for c, v in zip(items, adapted)]

        count = self.store.upsert(namespace, records)
        self.logger.info(
            "Indexed %d chunks (project=%r, department=%r, date=%s)",
            count,
            namespace,
            items[0].department,
            items[0].date_iso,
        )
        return count

    def index(
        self,
        texts: Sequence[str],
        *,
        project_name: str,
        department: str,
        date_iso: str,
    ) -> int:
        """
        Index ready-made documents, one record per non-blank text, chunk index
        = position among the kept texts.
        """
        kept = [t for t in texts if t and t.strip()]
        if len(kept) != len(texts):
            self.logger.warning("Dropped %d blank documents before indexing", len(texts) - len(kept))

        chunks: List[MeetingChunk] = [
            MeetingChunk(
                text=text,
                index=i,
                project_name=project_name,
                department=department,
                date_iso=date_iso,
                char_start=0,
                char_end=len(text),
            )
            for i, text in enumerate(kept)
        ]
        return self.index_chunks(chunks)

    def index_transcript(
        self,
        transcript: str,
        *,
        project_name: str,
        department: str,
        date_iso: str,
    ) -> int:
        chunks = self.chunker.chunk_transcript(
            transcript,
            project_name=project_name,
            department=department,
            date_iso=date_iso,
        )
        return self.index_chunks(list(chunks))

    def index_insights(
        self,
        insights: MeetingInsights,
        *,
        project_name: str,
        department: str,
        date_iso: str,
    ) -> int:
        return self.index(
            insights.to_texts(),
            project_name=project_name,
            department=department,
            date_iso=date_iso,
        )
