# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-17
# Description: InsightsProvider
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

from insights.types import MeetingInsights, MeetingMetadata


@runtime_checkable
class InsightsProvider(Protocol):
    """Generation backend, chosen once when the AppContainer is built."""

    name: str

    def extract_metadata(self, transcript: str) -> MeetingMetadata:
        ...

    def generate_insights(self, transcript: str, system_prompt: str) -> MeetingInsights:
        ...
