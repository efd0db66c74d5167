# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-16
# Updated: 2026-01-20
# Description: PineconeMeetingVectorStore
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from pinecone import Pinecone

from config.Config import Config
from utility.logging_utils import get_class_logger
from vectorstore.IndexRecord import IndexRecord, VectorMatch
from vectorstore.MeetingVectorStore import ALL_NAMESPACES, MeetingVectorStore

UPSERT_BATCH_SIZE = 100


def _field(obj: Any, name: str, default: Any = None) -> Any:
    """Pinecone responses are objects in newer SDKs and dicts in older ones."""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def build_filter(where: Dict[str, Any] | None) -> Dict[str, Any] | None:
    if not where:
        return None
    return {k: v if isinstance(v, dict) else {"$eq": v} for k, v in where.items()}


@dataclass
class PineconeMeetingVectorStore(MeetingVectorStore):
    """
    Pinecone-backed store. Projects map onto native Pinecone namespaces;
    an all-namespace search fans out over every namespace the index reports.
    """

    cfg: Config
    index: Any = None
    metric: str = "cosine"
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if self.index is None:
            self.index = self._build_index()

        self.logger.info("Pinecone index ready: '%s'", self.cfg.pinecone_index)

    def _build_index(self) -> Any:
        self.cfg.require("pinecone_api_key", "pinecone_index")
        pc = Pinecone(api_key=self.cfg.pinecone_api_key)

        if self.cfg.pinecone_index_host:
            self.logger.info("Connecting to Pinecone index host: %s", self.cfg.pinecone_index_host)
            return pc.Index(host=self.cfg.pinecone_index_host)
        return pc.Index(self.cfg.pinecone_index)

    def _namespaces(self) -> List[str]:
        stats = self.index.describe_index_stats()
        return list((_field(stats, "namespaces") or {}).keys())

    def test_connection(self) -> bool:
        try:
            self.index.describe_index_stats()
            return True
        except Exception as e:
            self.logger.error("Pinecone connection failed: %s", e)
            return False

    def upsert(self, namespace: str, records: Sequence[IndexRecord]) -> int:
        if not namespace:
            raise ValueError("namespace must not be empty")
        if not records:
            self.logger.warning("No records provided for upsert (namespace=%r)", namespace)
            return 0

        vectors = [
            {
                "id": rec.id,
                "values": list(rec.vector),
                "metadata": {k: v for k, v in rec.metadata.items() if v is not None},
            }
            for rec in records
        ]

        for i in range(0, len(vectors), UPSERT_BATCH_SIZE):
            batch = vectors[i:i + UPSERT_BATCH_SIZE]
            self.index.upsert(vectors=batch, namespace=namespace)

        self.logger.info("Upserted %d vectors to namespace '%s'", len(vectors), namespace)
        return len(vectors)

    def query(
            self,
            vector: Sequence[float],
            *,
            top_k: int = 5,
            namespace: Optional[str] = ALL_NAMESPACES,
            where: Dict[str, Any] | None = None,
    ) -> List[VectorMatch]:
        if top_k <= 0:
            raise ValueError(f"top_k must be positive, got {top_k}")

        pc_filter = build_filter(where)

        if namespace is not None:
            kwargs: Dict[str, Any] = {
                "vector": list(vector),
                "top_k": top_k,
                "namespace": namespace,
                "include_metadata": True,
            }
            if pc_filter is not None:
                kwargs["filter"] = pc_filter
            res = self.index.query(**kwargs)
        else:
            namespaces = self._namespaces()
            if not namespaces:
                self.logger.debug("Index has no namespaces; nothing to search")
                return []
            res = self.index.query_namespaces(
                vector=list(vector),
                namespaces=namespaces,
                metric=self.metric,
                top_k=top_k,
                filter=pc_filter,
                include_metadata=True,
            )

        matches = [
            VectorMatch(
                id=_field(m, "id"),
                score=_field(m, "score"),
                metadata=dict(_field(m, "metadata") or {}),
            )
            for m in (_field(res, "matches") or [])
        ]
        self.logger.debug(
            "Pinecone search complete (namespace=%r, filter=%s): %d matches",
            namespace,
            pc_filter,
            len(matches),
        )
        return matches[:top_k]

    def count(self, namespace: Optional[str] = ALL_NAMESPACES) -> int:
        stats = self.index.describe_index_stats()
        if namespace is None:
            return int(_field(stats, "total_vector_count") or 0)

        ns_stats = (_field(stats, "namespaces") or {}).get(namespace)
        if ns_stats is None:
            return 0
        return int(_field(ns_stats, "vector_count") or 0)

    def delete_namespace(self, namespace: str) -> int:
        existing = self.count(namespace)
        if not existing:
            self.logger.info("No records found for namespace '%s'", namespace)
            return 0

        self.index.delete(delete_all=True, namespace=namespace)
        self.logger.info("Deleted %d vectors from namespace '%s'", existing, namespace)
        return existing
