# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-16
# Updated: 2026-01-16
# Description: ChromaMeetingVectorStore
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import chromadb

import settings
from config.Config import Config
from utility.logging_utils import get_class_logger
from vectorstore.IndexRecord import IndexRecord, VectorMatch
from vectorstore.MeetingVectorStore import ALL_NAMESPACES, MeetingVectorStore

# Chroma has no namespaces; every record carries its namespace as metadata
NAMESPACE_KEY = "namespace"


def build_where(namespace: Optional[str], where: Dict[str, Any] | None) -> Dict[str, Any] | None:
    """Combine namespace scoping and equality filters into one Chroma `where`."""
    clauses: List[Dict[str, Any]] = []
    if namespace is not None:
        clauses.append({NAMESPACE_KEY: {"$eq": namespace}})
    for key, value in (where or {}).items():
        clauses.append({key: value if isinstance(value, dict) else {"$eq": value}})

    if not clauses:
        return None
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


@dataclass
class ChromaMeetingVectorStore(MeetingVectorStore):
    cfg: Config
    collection_name: str = settings.VECTOR_COLLECTION_DEFAULT
    client: Any = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if self.client is None:
            self.client = self._build_client()

        self.collection = self.client.get_or_create_collection(
            name=self.collection_name,
            metadata={"hnsw:space": "cosine", "description": "Meeting context knowledge base"},
            embedding_function=None,
        )
        self.logger.info("Chroma collection ready: '%s'", self.collection_name)

    def _build_client(self) -> Any:
        if self.cfg.chroma_api_key:
            self.cfg.require("chroma_tenant", "chroma_database")
            self.logger.info(
                "Initialising Chroma Cloud client (tenant=%s, database=%s)",
                self.cfg.chroma_tenant,
                self.cfg.chroma_database,
            )
            return chromadb.CloudClient(
                tenant=self.cfg.chroma_tenant,
                database=self.cfg.chroma_database,
                api_key=self.cfg.chroma_api_key,
            )

        self.logger.info("Initialising Chroma HTTP client (%s:%s)", self.cfg.chroma_host, self.cfg.chroma_port)
        return chromadb.HttpClient(
            host=self.cfg.chroma_host or "localhost",
            port=int(self.cfg.chroma_port or 8000),
        )

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma and our collection?
        """
        try:
            # count() is cheap and exercises the connection + auth
            _ = self.collection.count()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def upsert(self, namespace: str, records: Sequence[IndexRecord]) -> int:
        if not namespace:
            raise ValueError("namespace must not be empty")
        if not records:
            self.logger.warning("No records provided for upsert (namespace=%r)", namespace)
            return 0

        ids: List[str] = []
        documents: List[str] = []
        embeddings: List[List[float]] = []
        metadatas: List[Dict[str, Any]] = []

        for rec in records:
            meta = {k: v for k, v in rec.metadata.items() if v is not None}
            meta[NAMESPACE_KEY] = namespace

            ids.append(rec.id)
            documents.append(str(meta.get("text", "")))
            embeddings.append(list(rec.vector))
            metadatas.append(meta)

        self.collection.upsert(
            ids=ids,
            documents=documents,
            embeddings=embeddings,
            metadatas=metadatas,
        )
        self.logger.info(
            "Upserted %d records into namespace '%s' (collection '%s')",
            len(ids),
            namespace,
            self.collection_name,
        )
        return len(ids)

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

        chroma_where = build_where(namespace, where)
        self.logger.debug(
            "Querying collection '%s' (top_k=%d, where=%s)", self.collection_name, top_k, chroma_where
        )

        if self.collection.count() == 0:
            return []

        query_kwargs: Dict[str, Any] = {
            "query_embeddings": [list(vector)],
            "n_results": top_k,
            "include": ["documents", "metadatas", "distances"],
        }
        if chroma_where is not None:
            query_kwargs["where"] = chroma_where

        res = self.collection.query(**query_kwargs)

        # single query: take the first inner list of each field
        ids0 = (res.get("ids") or [[]])[0] or []
        docs0 = (res.get("documents") or [[]])[0] or []
        metas0 = (res.get("metadatas") or [[]])[0] or []
        dists0 = (res.get("distances") or [[]])[0] or []

        matches: List[VectorMatch] = []
        for i, chunk_id in enumerate(ids0):
            md = dict(metas0[i] or {}) if i < len(metas0) else {}
            if not md.get("text") and i < len(docs0) and docs0[i]:
                md["text"] = docs0[i]
            dist = dists0[i] if i < len(dists0) else None
            # cosine distance -> similarity
            score = 1.0 - float(dist) if dist is not None else None
            matches.append(VectorMatch(id=chunk_id, score=score, metadata=md))

        self.logger.debug("Chroma search complete: returned %d results (requested %d)", len(matches), top_k)
        return matches

    def count(self, namespace: Optional[str] = ALL_NAMESPACES) -> int:
        if namespace is None:
            return self.collection.count()
        res = self.collection.get(where=build_where(namespace, None), include=[])
        return len(res.get("ids") or [])

    def delete_namespace(self, namespace: str) -> int:
        """
        Delete every record in the given namespace.
        Returns the number of records actually deleted.
        """
        res = self.collection.get(where=build_where(namespace, None), include=[])

        # preserves order while de-duplicating
        ids = list(dict.fromkeys(res.get("ids") or []))
        if not ids:
            self.logger.info("No records found for namespace '%s'", namespace)
            return 0

        self.collection.delete(ids=ids)
        self.logger.info("Deleted %d records from namespace '%s'", len(ids), namespace)
        return len(ids)
