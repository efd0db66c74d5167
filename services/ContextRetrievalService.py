# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-19
# Description: ContextRetrievalService
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

import settings
from embedding.DimensionAdapter import DimensionAdapter
from embedding.MeetingEmbedder import MeetingEmbedder
from utility.logging_utils import get_class_logger, preview
from vectorstore.IndexRecord import VectorMatch
from vectorstore.MeetingVectorStore import ALL_NAMESPACES, MeetingVectorStore

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class RetrievalStrategy:
    """One step of the cascade: where to look and what to filter on."""

    name: str
    namespace: Optional[str]
    where: Optional[Dict[str, Any]] = None


def default_strategies(project_name: str, department: str) -> List[RetrievalStrategy]:
    """Most specific first, then progressively relaxed."""
    return [
        RetrievalStrategy("project_department", project_name, {"department": department}),
        RetrievalStrategy("project", project_name),
        RetrievalStrategy("department", ALL_NAMESPACES, {"department": department}),
        RetrievalStrategy("global", ALL_NAMESPACES),
    ]


def first_non_empty(
    candidates: Iterable[T],
    run: Callable[[T], Sequence[R]],
) -> Tuple[Optional[T], List[R]]:
    """
    Evaluate `run` over candidates in order and stop at the first non-empty
    result. Returns (winning candidate, results) or (None, []).
    """
    for candidate in candidates:
        results = list(run(candidate))
        if results:
            return candidate, results
    return None, []


@dataclass(frozen=True)
class RetrievalOutcome:
    strategy: Optional[str]
    matches: List[VectorMatch] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.matches)


class ContextRetrievalService:
    """
    Finds prior-meeting context for a transcript via the relevance cascade.
    No match after the last strategy is a valid outcome (empty context), not an error.
    """

    def __init__(
        self,
        *,
        store: MeetingVectorStore,
        embedder: MeetingEmbedder,
        adapter: DimensionAdapter,
        default_top_k: int = settings.DEFAULT_TOP_K,
        strategy_factory: Callable[[str, str], List[RetrievalStrategy]] = default_strategies,
        logger=None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.adapter = adapter
        self.default_top_k = default_top_k
        self.strategy_factory = strategy_factory
        self.logger = logger or get_class_logger(self.__class__)

    def retrieve_matches(
        self,
        project_name: str,
        department: str,
        search_query: str,
        top_k: int | None = None,
    ) -> RetrievalOutcome:
        k = self.default_top_k if top_k is None else top_k
        if k < 1:
            raise ValueError(f"top_k must be >= 1, got {k}")

        q = (search_query or "").strip()
        if not q:
            raise ValueError("search_query must not be empty")

        self.logger.info(
            "Retrieving context: project=%r department=%r top_k=%d query='%s'",
            project_name,
            department,
            k,
            preview(q, 80),
        )

        # one query vector, adapted once, shared by every strategy
        vector = self.adapter.adapt(self.embedder.embed_query(q))

        def run(strategy: RetrievalStrategy) -> List[VectorMatch]:
            matches = self.store.query(vector, top_k=k, namespace=strategy.namespace, where=strategy.where)
            self.logger.info(
                "Strategy '%s' (namespace=%r, where=%s): %d matches",
                strategy.name,
                strategy.namespace,
                strategy.where,
                len(matches),
            )
            return matches

        winner, matches = first_non_empty(self.strategy_factory(project_name, department), run)

        if winner is None:
            self.logger.info("No historical context found for project=%r", project_name)
            return RetrievalOutcome(strategy=None, matches=[])
        return RetrievalOutcome(strategy=winner.name, matches=matches[:k])

    def retrieve(
        self,
        project_name: str,
        department: str,
        search_query: str,
        top_k: int | None = None,
    ) -> str:
        outcome = self.retrieve_matches(project_name, department, search_query, top_k)
        return self.format_context(outcome.matches)

    @staticmethod
    def format_context(matches: Sequence[VectorMatch]) -> str:
        return "\n\n".join(f"Context #{i}: {m.text}" for i, m in enumerate(matches, start=1))
