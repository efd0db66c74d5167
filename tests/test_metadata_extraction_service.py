# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-19
# Description: test_metadata_extraction_service.py
# -----------------------------------------------------------------------------
import pytest

from conftest import ScriptedInsightsProvider
from insights.types import MeetingMetadata
from services.MetadataExtractionService import MetadataExtractionService
from utility.errors import ConfigurationError

TRANSCRIPT = "Alice will send the report by Friday. Bob agreed to review the budget. " * 5


def test_provider_metadata_is_returned():
    provider = ScriptedInsightsProvider(metadata=MeetingMetadata("Phoenix", "Engineering", "migration lock"))

    metadata = MetadataExtractionService(provider=provider).extract(TRANSCRIPT)

    assert metadata == MeetingMetadata("Phoenix", "Engineering", "migration lock")


@pytest.mark.parametrize(
    "error",
    [ConnectionError("timeout"), ConfigurationError("no key", missing=["AZURE_OPENAI_API_KEY"]), ValueError("bad json")],
)
def test_provider_failure_degrades_to_defaults(error):
    provider = ScriptedInsightsProvider(metadata_error=error)

    metadata = MetadataExtractionService(provider=provider).extract(TRANSCRIPT)

    assert metadata.project_name == "General Discussion"
    assert metadata.department == "General"
    assert metadata.search_string == TRANSCRIPT[:200].strip()


def test_no_provider_uses_defaults():
    metadata = MetadataExtractionService().extract("Short call.")

    assert metadata == MeetingMetadata("General Discussion", "General", "Short call.")


def test_blank_fields_are_filled_individually():
    provider = ScriptedInsightsProvider(metadata=MeetingMetadata("Phoenix", " ", ""))

    metadata = MetadataExtractionService(provider=provider).extract(TRANSCRIPT)

    assert metadata.project_name == "Phoenix"
    assert metadata.department == "General"
    assert metadata.search_string == TRANSCRIPT[:200].strip()


def test_empty_transcript_is_rejected():
    with pytest.raises(ValueError):
        MetadataExtractionService().extract("   ")
