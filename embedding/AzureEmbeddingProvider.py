# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-01-14
# Description: AzureEmbeddingProvider
# -----------------------------------------------------------------------------
from typing import Any, List, Optional

import numpy as np
from openai import AzureOpenAI

from config.Config import Config
from utility.logging_utils import get_class_logger


class AzureEmbeddingProvider:
    """
    Remote embedding provider backed by an Azure OpenAI embeddings deployment.
    One request per text (no batching) so a failure points at a single input.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            client: Optional[Any] = None,
            normalize: bool = True,
            logger=None,
    ):
        self.cfg = cfg
        self.normalize = normalize
        self.logger = logger or get_class_logger(self.__class__)

        if client is None:
            cfg.require(*Config.AZURE_EMBED_FIELDS)
            client = AzureOpenAI(
                api_key=cfg.azure_openai_api_key,
                azure_endpoint=cfg.azure_openai_embed_endpoint,
                api_version=cfg.azure_openai_api_version,
            )

        self.client = client
        self.model = cfg.azure_openai_embed_deployment or "text-embedding-3-large"
        self.logger.info(
            "Azure embedding provider initialised (endpoint=%s, deployment=%s)",
            cfg.azure_openai_embed_endpoint,
            self.model,
        )

    def embed_text(self, text: str) -> List[float]:
        self.logger.debug("Requesting Azure embedding (text_len=%d)", len(text or ""))
        resp = self.client.embeddings.create(model=self.model, input=text)

        data = getattr(resp, "data", None) or []
        if not data:
            raise ValueError("Invalid embeddings response: no data")

        arr = np.asarray(getattr(data[0], "embedding", None) or [], dtype=np.float32)
        if arr.ndim != 1 or arr.size == 0 or not np.all(np.isfinite(arr)):
            raise ValueError("Invalid embeddings response: embedding is not a non-empty numeric vector")

        # Normalize vectors (cosine-friendly)
        if self.normalize:
            arr = arr / (np.linalg.norm(arr) + 1e-12)

        self.logger.debug("Azure vector generated (dim=%d)", arr.size)
        return arr.tolist()
