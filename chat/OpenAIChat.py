# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-22
# Updated: 2026-01-18
# Description: OpenAIChat
# -----------------------------------------------------------------------------
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from openai import AzureOpenAI, OpenAI

from config.Config import Config
from utility.errors import InsightsParseError
from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


@dataclass
class OpenAIChat:
    """
    Chat-completions wrapper shared by the Azure OpenAI and OpenAI-direct providers.

    Build with `for_azure(cfg)` / `for_openai(cfg)`, or pass any client exposing
    `chat.completions.create` (tests inject a fake).
    """

    client: Any
    model: str
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        if not self.model:
            raise ValueError("OpenAIChat requires a model / deployment name")
        self.logger.info("OpenAIChat initialised (client=%s, model=%s)", type(self.client).__name__, self.model)

    @classmethod
    def for_azure(cls, cfg: Config, logger: Any = None) -> "OpenAIChat":
        cfg.require(*Config.AZURE_CHAT_FIELDS)
        client = AzureOpenAI(
            api_key=cfg.azure_openai_api_key,
            azure_endpoint=cfg.azure_openai_chat_endpoint,
            api_version=cfg.azure_openai_api_version,
        )
        return cls(client=client, model=cfg.azure_openai_chat_deployment, logger=logger)

    @classmethod
    def for_openai(cls, cfg: Config, logger: Any = None) -> "OpenAIChat":
        cfg.require(*Config.OPENAI_CHAT_FIELDS)
        client = OpenAI(
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url or None,
        )
        return cls(client=client, model=cfg.openai_chat_model, logger=logger)

    # Standard chat call
    def chat(
            self,
            messages: List[Message],
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
            response_format: Optional[Dict[str, Any]] = None,
            tools: Optional[List[Dict[str, Any]]] = None,
            tool_choice: Optional[Dict[str, Any]] = None,
            extra_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        # reasoning deployments (gpt-5) reject sampling overrides, so only send what was asked for
        if temperature is not None:
            params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if response_format is not None:
            params["response_format"] = response_format
        if tools:
            params["tools"] = tools
        if tool_choice is not None:
            params["tool_choice"] = tool_choice
        if extra_params:
            params.update(extra_params)

        self.logger.debug(
            "Chat request: model=%s messages=%d tools=%d response_format=%s",
            self.model,
            len(messages),
            len(tools or []),
            response_format,
        )

        resp = self.client.chat.completions.create(**params)

        self.logger.debug("Token usage: %r", getattr(resp, "usage", None))
        return resp

    @staticmethod
    def _first_message(resp: Any) -> Any:
        try:
            return resp.choices[0].message
        except (AttributeError, IndexError, TypeError) as e:
            raise InsightsParseError(f"Unexpected chat response format: {e}") from e

    def chat_json(self, system_text: str, user_text: str, **kwargs: Any) -> Dict[str, Any]:
        """JSON-mode completion, parsed into a dict."""
        resp = self.chat(
            [
                {"role": "system", "content": system_text},
                {"role": "user", "content": user_text},
            ],
            response_format={"type": "json_object"},
            **kwargs,
        )

        content = self._first_message(resp).content or ""
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise InsightsParseError(f"Model returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise InsightsParseError(f"Expected a JSON object, got {type(payload).__name__}")
        return payload

    def chat_tool_call(
            self,
            messages: List[Message],
            tool: Dict[str, Any],
            **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Force a single function tool and return its parsed arguments.
        """
        tool_name = tool["function"]["name"]
        resp = self.chat(
            messages,
            tools=[tool],
            tool_choice={"type": "function", "function": {"name": tool_name}},
            **kwargs,
        )

        tool_calls = getattr(self._first_message(resp), "tool_calls", None) or []
        call = next((c for c in tool_calls if c.function.name == tool_name), None)
        if call is None:
            raise InsightsParseError(f"Invalid or missing '{tool_name}' tool call in chat response")

        try:
            args = json.loads(call.function.arguments or "{}")
        except json.JSONDecodeError as e:
            raise InsightsParseError(f"Tool '{tool_name}' returned invalid JSON arguments: {e}") from e

        self.logger.info("Tool call '%s' parsed (model=%s)", tool_name, getattr(resp, "model", self.model))
        return args

    def healthcheck(self) -> bool:
        try:
            self.chat([{"role": "user", "content": "ping"}])
            return True
        except Exception as e:
            self.logger.warning("Chat healthcheck failed: %s", e)
            return False
