# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-24
# Description: GeminiInsightsProvider
# -----------------------------------------------------------------------------
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from config.Config import Config
from insights.prompts import (
    DEFAULT_SYSTEM_PROMPT,
    INSIGHTS_SCHEMA,
    METADATA_SCHEMA,
    METADATA_SYSTEM_PROMPT,
    build_insights_user_message,
)
from insights.types import MeetingInsights, MeetingMetadata
from utility.errors import InsightsParseError
from utility.logging_utils import get_class_logger, preview


@dataclass
class GeminiInsightsProvider:
    """
    Structured generation over Gemini `generate_content`: both metadata and
    insights use JSON output constrained by a response schema.
    """

    client: Any
    model: str
    name: str = "gemini"
    temperature: float = 0.2
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    @classmethod
    def from_config(cls, cfg: Config) -> "GeminiInsightsProvider":
        cfg.require(*Config.GEMINI_FIELDS)
        return cls(client=genai.Client(api_key=cfg.gemini_api_key), model=cfg.gemini_model)

    def _generate_json(
            self,
            contents: str,
            schema: Dict[str, Any],
            system_instruction: Optional[str],
    ) -> Dict[str, Any]:
        config = types.GenerateContentConfig(
            system_instruction=system_instruction or None,
            response_mime_type="application/json",
            response_schema=schema,
            temperature=self.temperature,
        )
        resp = self.client.models.generate_content(model=self.model, contents=contents, config=config)

        text = (getattr(resp, "text", None) or "").strip()
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise InsightsParseError(f"Gemini returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise InsightsParseError(f"Expected a JSON object, got {type(payload).__name__}")
        return payload

    def extract_metadata(self, transcript: str) -> MeetingMetadata:
        self.logger.info("Extracting metadata (provider=%s, transcript='%s')", self.name, preview(transcript, 80))
        payload = self._generate_json(transcript, METADATA_SCHEMA, METADATA_SYSTEM_PROMPT)
        return MeetingMetadata.from_payload(payload, transcript)

    def generate_insights(self, transcript: str, system_prompt: str) -> MeetingInsights:
        payload = self._generate_json(
            build_insights_user_message(transcript),
            INSIGHTS_SCHEMA,
            system_prompt or DEFAULT_SYSTEM_PROMPT,
        )
        insights = MeetingInsights.from_payload(payload)
        self.logger.info(
            "Insights generated (provider=%s, model=%s, to_do_items=%d)",
            self.name,
            self.model,
            len(insights.to_do_list),
        )
        return insights
