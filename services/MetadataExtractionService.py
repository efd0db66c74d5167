# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-19
# Description: MetadataExtractionService
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Optional

from insights.InsightsProvider import InsightsProvider
from insights.types import MeetingMetadata
from utility.logging_utils import get_class_logger


@dataclass
class MetadataExtractionService:
    """
    Derives (project, department, search string) for a transcript.
    Never fails on provider problems: missing credentials, transport errors
    or unparseable output all degrade to the defaults.
    """

    provider: Optional[InsightsProvider] = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def extract(self, transcript: str) -> MeetingMetadata:
        if not (transcript or "").strip():
            raise ValueError("transcript must not be empty")

        if self.provider is None:
            self.logger.warning("No insights provider configured; using default metadata")
            return MeetingMetadata.defaults_for(transcript)

        try:
            metadata = self.provider.extract_metadata(transcript)
        except Exception as e:
            self.logger.warning(
                "Metadata extraction failed (provider=%s), using defaults: %s",
                getattr(self.provider, "name", type(self.provider).__name__),
                e,
            )
            return MeetingMetadata.defaults_for(transcript)

        # a provider may still hand back blanks; fill them field by field
        metadata = MeetingMetadata.from_payload(
            {
                "projectName": metadata.project_name,
                "department": metadata.department,
                "searchString": metadata.search_string,
            },
            transcript,
        )
        self.logger.info(
            "Metadata extracted: project=%r department=%r", metadata.project_name, metadata.department
        )
        return metadata
