# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: MeetingPipelineService
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Dict, Optional, TypeVar

from insights.InsightsProvider import InsightsProvider
from insights.prompts import DEFAULT_SYSTEM_PROMPT, build_composite_prompt
from insights.types import MeetingInsights, MeetingMetadata
from services.ContextRetrievalService import ContextRetrievalService
from services.MeetingIndexService import MeetingIndexService
from services.MetadataExtractionService import MetadataExtractionService
from utility.errors import ConfigurationError, PipelineStageError
from utility.logging_utils import get_class_logger
from utility.time_utils import to_iso, utc_now

T = TypeVar("T")


class PipelineStage(str, Enum):
    EXTRACT_METADATA = "extract_metadata"
    EMBED_AND_STORE_CURRENT = "embed_and_store_current"
    RETRIEVE_CONTEXT = "retrieve_context"
    GENERATE_INSIGHTS = "generate_insights"
    STORE_INSIGHTS = "store_insights"


@dataclass(frozen=True)
class PipelineResult:
    metadata: MeetingMetadata
    context: str
    context_strategy: Optional[str]
    insights: MeetingInsights
    stored_chunks: int
    stored_insight_chunks: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "context": self.context,
            "context_strategy": self.context_strategy,
            "insights": self.insights.to_dict(),
            "stored_chunks": self.stored_chunks,
            "stored_insight_chunks": self.stored_insight_chunks,
        }


class MeetingPipelineService:
    """
    Five sequential stages per transcript:

        ExtractMetadata -> EmbedAndStoreCurrent -> RetrieveContext
            -> GenerateInsights -> StoreInsights

    The first failing stage aborts the run with a PipelineStageError naming it.
    Nothing already stored is rolled back: a failed generation still leaves
    the raw transcript searchable for later meetings.
    """

    def __init__(
        self,
        *,
        metadata_service: MetadataExtractionService,
        index_service: MeetingIndexService,
        retrieval_service: ContextRetrievalService,
        provider: Optional[InsightsProvider],
        clock: Callable[[], datetime] = utc_now,
        logger: logging.Logger | None = None,
    ) -> None:
        self.metadata_service = metadata_service
        self.index_service = index_service
        self.retrieval_service = retrieval_service
        self.provider = provider
        self.clock = clock
        self.logger = logger or get_class_logger(self.__class__)

    def _stage(self, stage: PipelineStage, fn: Callable[[], T]) -> T:
        self.logger.info("Stage '%s' (start)", stage.value)
        try:
            result = fn()
        except Exception as e:
            self.logger.error("Stage '%s' failed: %s", stage.value, e, exc_info=True)
            raise PipelineStageError(stage, e) from e
        self.logger.info("Stage '%s' (done)", stage.value)
        return result

    def _generate(self, transcript: str, prompt: str) -> MeetingInsights:
        if self.provider is None:
            raise ConfigurationError(
                "No insights provider configured; check MEETING_INSIGHTS_PROVIDER and its credentials"
            )
        return self.provider.generate_insights(transcript, prompt)

    def _insights_date_iso(self, transcript_at: datetime) -> str:
        # must differ from the transcript's timestamp at millisecond precision
        insights_at = self.clock()
        if to_iso(insights_at) <= to_iso(transcript_at):
            insights_at = transcript_at + timedelta(milliseconds=1)
        return to_iso(insights_at)

    def run(
        self,
        transcript: str,
        system_prompt: Optional[str] = None,
        top_k: Optional[int] = None,
    ) -> PipelineResult:
        if not isinstance(transcript, str) or not transcript.strip():
            raise ValueError("transcript must be a non-empty string")
        if top_k is not None and top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")

        metadata = self._stage(
            PipelineStage.EXTRACT_METADATA,
            lambda: self.metadata_service.extract(transcript),
        )

        transcript_at = self.clock()
        stored_chunks = self._stage(
            PipelineStage.EMBED_AND_STORE_CURRENT,
            lambda: self.index_service.index_transcript(
                transcript,
                project_name=metadata.project_name,
                department=metadata.department,
                date_iso=to_iso(transcript_at),
            ),
        )

        outcome = self._stage(
            PipelineStage.RETRIEVE_CONTEXT,
            lambda: self.retrieval_service.retrieve_matches(
                metadata.project_name,
                metadata.department,
                metadata.search_string,
                top_k,
            ),
        )
        context = self.retrieval_service.format_context(outcome.matches)

        prompt = build_composite_prompt(
            system_prompt or DEFAULT_SYSTEM_PROMPT,
            metadata.project_name,
            context,
            transcript,
        )
        insights = self._stage(
            PipelineStage.GENERATE_INSIGHTS,
            lambda: self._generate(transcript, prompt),
        )

        stored_insight_chunks = self._stage(
            PipelineStage.STORE_INSIGHTS,
            lambda: self.index_service.index_insights(
                insights,
                project_name=metadata.project_name,
                department=metadata.department,
                date_iso=self._insights_date_iso(transcript_at),
            ),
        )

        self.logger.info(
            "Pipeline complete: project=%r stored_chunks=%d context_strategy=%s to_do_items=%d",
            metadata.project_name,
            stored_chunks,
            outcome.strategy,
            len(insights.to_do_list),
        )
        return PipelineResult(
            metadata=metadata,
            context=context,
            context_strategy=outcome.strategy,
            insights=insights,
            stored_chunks=stored_chunks,
            stored_insight_chunks=stored_insight_chunks,
        )
