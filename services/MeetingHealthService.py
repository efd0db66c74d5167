# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-21
# Description: MeetingHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import settings
from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from chat.OpenAIChat import OpenAIChat
from embedding.MeetingEmbedder import MeetingEmbedder
from utility.logging_utils import get_class_logger
from vectorstore.MeetingVectorStore import MeetingVectorStore


@dataclass
class MeetingHealthService:
    """
    Smoke tests over the live collaborators (vector store, embeddings, chat).
    A check that raises counts as failed; the report always comes back.
    """

    store: MeetingVectorStore
    embedder: MeetingEmbedder
    chat_client: Optional[OpenAIChat] = None
    vector_backend: str = settings.VECTOR_BACKEND
    insights_provider: str = settings.INSIGHTS_PROVIDER
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def _check_embeddings(self) -> bool:
        vector = self.embedder.embed_query("health check")
        return bool(vector)

    def run_all(self, run_chat: bool = True) -> Dict[str, bool]:
        checks: Dict[str, Callable[[], bool]] = {
            "vector_store": self.store.test_connection,
            "embeddings": self._check_embeddings,
        }
        if run_chat and self.chat_client is not None:
            checks["chat"] = self.chat_client.healthcheck

        results: Dict[str, bool] = {}
        for name, check in checks.items():
            try:
                results[name] = bool(check())
            except Exception as e:
                self.logger.exception("Health check '%s' raised an exception: %s", name, e)
                results[name] = False

            if results[name]:
                self.logger.info("%s: PASS", name)
            else:
                self.logger.error("%s: FAIL", name)

        return results

    def deep_health(self, run_chat: bool = True) -> DeepHealthResponse:
        results = self.run_all(run_chat=run_chat)

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            vector_backend=self.vector_backend,
            insights_provider=self.insights_provider,
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
        )
