# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-24
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional, Tuple

import settings
from chat.OpenAIChat import OpenAIChat
from chunking.TranscriptChunker import TranscriptChunker
from config.Config import Config
from embedding.AzureEmbeddingProvider import AzureEmbeddingProvider
from embedding.DimensionAdapter import DimensionAdapter
from embedding.LocalEmbeddingModel import LocalEmbeddingModel
from embedding.MeetingEmbedder import MeetingEmbedder
from insights.GeminiInsightsProvider import GeminiInsightsProvider
from insights.InsightsProvider import InsightsProvider
from insights.OpenAIInsightsProvider import OpenAIInsightsProvider
from insights.SimulatedInsightsProvider import SimulatedInsightsProvider
from services.ContextRetrievalService import ContextRetrievalService
from services.MeetingHealthService import MeetingHealthService
from services.MeetingIndexService import MeetingIndexService
from services.MeetingPipelineService import MeetingPipelineService
from services.MetadataExtractionService import MetadataExtractionService
from utility.errors import ConfigurationError
from utility.logging_utils import get_class_logger
from vectorstore.ChromaMeetingVectorStore import ChromaMeetingVectorStore
from vectorstore.MeetingVectorStore import MeetingVectorStore
from vectorstore.PineconeMeetingVectorStore import PineconeMeetingVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Backends and the insights provider are selected here, once, from settings.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("Building AppContainer: %r", self.cfg.summary())

        # Core infrastructure
        self.store = self._build_store()
        self.local_model = LocalEmbeddingModel()
        self.embedder = MeetingEmbedder(
            primary=self._build_remote_embedder(),
            fallback=self.local_model,
        )
        self.adapter = DimensionAdapter()
        self.chunker = TranscriptChunker()

        # Generation
        self.chat_client, self.insights_provider = self._build_insights_provider()

        # Services
        self.index_service = MeetingIndexService(
            store=self.store,
            embedder=self.embedder,
            adapter=self.adapter,
            chunker=self.chunker,
        )
        self.retrieval_service = ContextRetrievalService(
            store=self.store,
            embedder=self.embedder,
            adapter=self.adapter,
        )
        self.metadata_service = MetadataExtractionService(provider=self.insights_provider)
        self.pipeline_service = MeetingPipelineService(
            metadata_service=self.metadata_service,
            index_service=self.index_service,
            retrieval_service=self.retrieval_service,
            provider=self.insights_provider,
        )
        self.health_service = MeetingHealthService(
            store=self.store,
            embedder=self.embedder,
            chat_client=self.chat_client,
        )

    def _build_store(self) -> MeetingVectorStore:
        if settings.VECTOR_BACKEND == "pinecone":
            return PineconeMeetingVectorStore(cfg=self.cfg)
        return ChromaMeetingVectorStore(cfg=self.cfg, collection_name=settings.VECTOR_COLLECTION_DEFAULT)

    def _build_remote_embedder(self) -> Optional[AzureEmbeddingProvider]:
        if settings.FORCE_LOCAL_EMBEDDINGS:
            self.logger.info("MEETING_FORCE_LOCAL_EMBEDDINGS set; remote embeddings disabled")
            return None
        if not self.cfg.has(*Config.AZURE_EMBED_FIELDS):
            self.logger.warning(
                "Azure embeddings not configured (missing %s); local model only",
                self.cfg.missing(*Config.AZURE_EMBED_FIELDS),
            )
            return None
        return AzureEmbeddingProvider(self.cfg)

    def _build_insights_provider(self) -> Tuple[Optional[OpenAIChat], Optional[InsightsProvider]]:
        name = settings.INSIGHTS_PROVIDER
        if name == "simulated":
            return None, SimulatedInsightsProvider()

        try:
            if name == "gemini":
                return None, GeminiInsightsProvider.from_config(self.cfg)
            chat = OpenAIChat.for_azure(self.cfg) if name == "azure" else OpenAIChat.for_openai(self.cfg)
        except ConfigurationError as e:
            # metadata degrades to defaults; generation reports the missing settings
            self.logger.warning("Insights provider '%s' unavailable: %s", name, e)
            return None, None

        return chat, OpenAIInsightsProvider(chat_client=chat, name=name)
