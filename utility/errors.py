# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-12
# Description: errors.py
# -----------------------------------------------------------------------------
from typing import Any, Iterable, Optional, Tuple


class ConfigurationError(RuntimeError):
    """A required setting or optional dependency is missing."""

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.missing: Tuple[str, ...] = tuple(missing)


class InsightsParseError(ValueError):
    """The model returned a structured response we could not parse."""


class PipelineStageError(RuntimeError):
    """
    First fatal error raised by the meeting pipeline.
    `stage` names where it happened (extraction, storage, retrieval, generation).
    """

    def __init__(self, stage: Any, cause: Optional[BaseException] = None) -> None:
        stage_name = getattr(stage, "value", stage)
        super().__init__(f"Pipeline stage '{stage_name}' failed: {cause}")
        self.stage = stage
        self.cause = cause
