# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-24
# Description: dependencies.py
# -----------------------------------------------------------------------------
import threading
from functools import lru_cache

from api.AppContainer import AppContainer
from config.Config import Config
from services.ContextRetrievalService import ContextRetrievalService
from services.MeetingHealthService import MeetingHealthService
from services.MeetingIndexService import MeetingIndexService
from services.MeetingPipelineService import MeetingPipelineService
from services.MetadataExtractionService import MetadataExtractionService

_container: AppContainer | None = None
_container_lock = threading.Lock()


@lru_cache
def get_cfg() -> Config:
    return Config.from_env()


def get_container() -> AppContainer:
    """
    Built on first request, so importing the app never touches remote services.
    Sync dependencies run in the threadpool: concurrent first requests wait on
    the lock and share the one container.
    """
    global _container
    if _container is not None:
        return _container

    with _container_lock:
        if _container is None:
            _container = AppContainer(cfg=get_cfg())
        return _container


def reset_container() -> None:
    global _container
    with _container_lock:
        _container = None


def get_health_service() -> MeetingHealthService:
    return get_container().health_service


def get_pipeline_service() -> MeetingPipelineService:
    return get_container().pipeline_service


def get_index_service() -> MeetingIndexService:
    return get_container().index_service


def get_retrieval_service() -> ContextRetrievalService:
    return get_container().retrieval_service


def get_metadata_service() -> MetadataExtractionService:
    return get_container().metadata_service
