# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Updated: 2026-01-24
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass, fields
from typing import List, Mapping, Optional

from dotenv import load_dotenv, find_dotenv

from utility.errors import ConfigurationError

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)


@dataclass(frozen=True)
class Config:
    # Azure OpenAI (chat + embeddings, may live on separate resources)
    azure_openai_api_key: str = ""
    azure_openai_chat_endpoint: str = ""
    azure_openai_chat_deployment: str = ""
    azure_openai_embed_endpoint: str = ""
    azure_openai_embed_deployment: str = ""
    azure_openai_api_version: str = ""

    # OpenAI (direct, alternative chat provider)
    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_chat_model: str = ""

    # Chroma Vector Database (Cloud if api key is set, otherwise HTTP host/port)
    chroma_host: str = ""
    chroma_port: str = ""
    chroma_api_key: str = ""
    chroma_tenant: str = ""
    chroma_database: str = ""

    # Pinecone Vector Database
    pinecone_api_key: str = ""
    pinecone_index: str = ""
    pinecone_index_host: str = ""

    # Google Gemini (alternative insights provider)
    gemini_api_key: str = ""
    gemini_model: str = ""

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Azure OpenAI
        "azure_openai_api_key": "AZURE_OPENAI_API_KEY",
        "azure_openai_chat_endpoint": "AZURE_OPENAI_CHAT_ENDPOINT",
        "azure_openai_chat_deployment": "AZURE_OPENAI_CHAT_DEPLOYMENT",
        "azure_openai_embed_endpoint": "AZURE_OPENAI_EMBEDDINGS_ENDPOINT",
        "azure_openai_embed_deployment": "AZURE_OPENAI_EMBEDDINGS_DEPLOYMENT",
        "azure_openai_api_version": "AZURE_OPENAI_API_VERSION",

        # OpenAI direct
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_chat_model": "OPENAI_CHAT_MODEL",

        # Chroma
        "chroma_host": "CHROMA_HOST",
        "chroma_port": "CHROMA_PORT",
        "chroma_api_key": "CHROMA_API_KEY",
        "chroma_tenant": "CHROMA_TENANT",
        "chroma_database": "CHROMA_DATABASE",

        # Pinecone
        "pinecone_api_key": "PINECONE_API_KEY",
        "pinecone_index": "PINECONE_INDEX",
        "pinecone_index_host": "PINECONE_INDEX_HOST",

        # Gemini
        "gemini_api_key": "GEMINI_API_KEY",
        "gemini_model": "GEMINI_MODEL",
    }

    # Older / shared env var names consulted when the preferred one is blank
    ENV_FALLBACKS = {
        "azure_openai_chat_endpoint": "AZURE_OPENAI_ENDPOINT",
        "azure_openai_embed_endpoint": "AZURE_OPENAI_ENDPOINT",
    }

    ENV_DEFAULTS = {
        "azure_openai_chat_deployment": "gpt-5",
        "azure_openai_api_version": "2025-01-01-preview",
        "chroma_host": "localhost",
        "chroma_port": "8000",
        "pinecone_index": "meeting-context-index",
        "gemini_model": "gemini-2.5-flash",
    }

    # Convenient *groups* for use in tests / health checks / provider selection
    AZURE_CHAT_FIELDS = (
        "azure_openai_api_key",
        "azure_openai_chat_endpoint",
        "azure_openai_chat_deployment",
    )

    AZURE_EMBED_FIELDS = (
        "azure_openai_api_key",
        "azure_openai_embed_endpoint",
        "azure_openai_embed_deployment",
    )

    OPENAI_CHAT_FIELDS = (
        "openai_api_key",
        "openai_chat_model",
    )

    GEMINI_FIELDS = (
        "gemini_api_key",
        "gemini_model",
    )

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build Config object from environment variables."""
        env = os.environ if environ is None else environ

        def read(field_name: str) -> str:
            value = (env.get(Config.ENV_VARS[field_name]) or "").strip()
            if not value and field_name in Config.ENV_FALLBACKS:
                value = (env.get(Config.ENV_FALLBACKS[field_name]) or "").strip()
            return value or Config.ENV_DEFAULTS.get(field_name, "")

        return Config(**{f.name: read(f.name) for f in fields(Config)})

    def missing(self, *field_names: str) -> List[str]:
        """Env var names for the given fields that resolved to empty values."""
        return [self.ENV_VARS[f] for f in field_names if not getattr(self, f)]

    def has(self, *field_names: str) -> bool:
        return not self.missing(*field_names)

    def require(self, *field_names: str) -> None:
        """
        Fail fast at the point of first use, naming the missing env vars.
        Construction never fails so degraded modes stay possible.
        """
        missing_env_vars = self.missing(*field_names)
        if missing_env_vars:
            raise ConfigurationError(
                f"Missing required environment variables: {missing_env_vars}",
                missing=missing_env_vars,
            )

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "azure_openai_chat_endpoint": self.azure_openai_chat_endpoint,
            "azure_openai_chat_deployment": self.azure_openai_chat_deployment,
            "azure_openai_embed_endpoint": self.azure_openai_embed_endpoint,
            "azure_openai_embed_deployment": self.azure_openai_embed_deployment,
            "openai_base_url": self.openai_base_url,
            "openai_chat_model": self.openai_chat_model,
            "chroma_host": self.chroma_host,
            "chroma_tenant": self.chroma_tenant,
            "chroma_database": self.chroma_database,
            "pinecone_index": self.pinecone_index,
            "pinecone_index_host": self.pinecone_index_host,
            "gemini_model": self.gemini_model,
        }
