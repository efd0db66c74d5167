# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-14
# Description: LocalEmbeddingModel
# -----------------------------------------------------------------------------
import logging
import threading
from typing import Any, Callable, List, Optional, Sequence

import numpy as np

import settings
from utility.errors import ConfigurationError
from utility.logging_utils import get_class_logger


class LocalEmbeddingModel:
    """
    In-process sentence-transformers model used when the remote provider fails.

    The model is loaded at most once per handle, on first use. Concurrent first
    callers wait on the same lock and share the single load. A failed load is
    not cached, so the next call tries again.
    """

    def __init__(
        self,
        model_name: str = settings.LOCAL_EMBED_MODEL,
        *,
        loader: Optional[Callable[[str], Any]] = None,
        device: str = "cpu",
        logger: logging.Logger | None = None,
    ) -> None:
        self.model_name = model_name
        self.device = device
        self._loader = loader or self._load_sentence_transformer
        self._model: Any = None
        self._lock = threading.Lock()
        self.logger = logger or get_class_logger(self.__class__)

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    def _load_sentence_transformer(self, model_name: str) -> Any:
        try:
            from sentence_transformers import SentenceTransformer
        except ImportError as e:
            raise ConfigurationError(
                "Local embedding fallback requires 'sentence-transformers'. "
                "Install it with: pip install 'meeting-rag[local]'",
                missing=("sentence-transformers",),
            ) from e
        return SentenceTransformer(model_name, device=self.device)

    def get(self) -> Any:
        """Return the loaded model, loading it on first use."""
        if self._model is not None:
            return self._model

        with self._lock:
            if self._model is not None:  # another caller finished the load while we waited
                return self._model

            self.logger.info("Loading local embedding model: %s", self.model_name)
            model = self._loader(self.model_name)
            self._model = model
            self.logger.info("Local embedding model loaded: %s", self.model_name)
            return model

    def embed(self, texts: Sequence[str]) -> List[List[float]]:
        items = list(texts)
        if not items:
            return []

        model = self.get()
        self.logger.info("Starting local embedding generation (texts=%d)", len(items))

        # mean-pooled, L2-normalised sentence embeddings
        arr = np.asarray(
            model.encode(items, normalize_embeddings=True, show_progress_bar=False),
            dtype=np.float32,
        )
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.shape[0] != len(items):
            raise ValueError(f"Local model returned {arr.shape[0]} vectors for {len(items)} texts")

        self.logger.info("Local embeddings completed (vectors=%d, dim=%d)", arr.shape[0], arr.shape[1])
        return arr.tolist()
