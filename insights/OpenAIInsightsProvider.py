# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-18
# Description: OpenAIInsightsProvider
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any

from chat.OpenAIChat import OpenAIChat
from insights.prompts import (
    DEFAULT_SYSTEM_PROMPT,
    INSIGHTS_TOOL,
    METADATA_SYSTEM_PROMPT,
    build_insights_user_message,
)
from insights.types import MeetingInsights, MeetingMetadata
from utility.logging_utils import get_class_logger, preview


@dataclass
class OpenAIInsightsProvider:
    """
    Structured generation over chat completions: JSON mode for metadata,
    a forced `extract_meeting_insights` tool call for insights.
    Works for Azure OpenAI and OpenAI direct alike (the chat client decides).
    """

    chat_client: OpenAIChat
    name: str = "azure"
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def extract_metadata(self, transcript: str) -> MeetingMetadata:
        self.logger.info("Extracting metadata (provider=%s, transcript='%s')", self.name, preview(transcript, 80))
        payload = self.chat_client.chat_json(METADATA_SYSTEM_PROMPT, transcript)
        return MeetingMetadata.from_payload(payload, transcript)

    def generate_insights(self, transcript: str, system_prompt: str) -> MeetingInsights:
        messages = [
            {"role": "system", "content": system_prompt or DEFAULT_SYSTEM_PROMPT},
            {"role": "user", "content": build_insights_user_message(transcript)},
        ]
        args = self.chat_client.chat_tool_call(messages, INSIGHTS_TOOL)
        insights = MeetingInsights.from_payload(args)
        self.logger.info(
            "Insights generated (provider=%s, to_do_items=%d)", self.name, len(insights.to_do_list)
        )
        return insights
