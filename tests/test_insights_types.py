# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-17
# Description: test_insights_types.py
# -----------------------------------------------------------------------------
import pytest

from insights.prompts import build_composite_prompt
from insights.types import MeetingInsights, MeetingMetadata, ToDoItem
from utility.errors import InsightsParseError


def test_insights_from_payload_sorts_and_fills_defaults():
    insights = MeetingInsights.from_payload(
        {
            "overview": "  ",
            "toDoList": [
                {"person": "Carol", "task": "update runbook", "type": "action"},
                {"person": "", "task": "pick a demo date", "type": "action"},
                {"person": "Alice", "task": "retry approved", "type": "Takeaway"},
            ],
        }
    )

    assert insights.overview == "No overview generated"
    assert [it.person for it in insights.to_do_list] == ["Alice", "Carol", "To be Assigned"]
    assert insights.to_do_list[0].type == "takeaway"


def test_store_back_texts():
    insights = MeetingInsights(
        overview="Retry tonight.",
        to_do_list=[ToDoItem("Bob", "retry the deploy", "action"), ToDoItem("Team", "freeze Friday", "takeaway")],
    )

    assert insights.to_texts() == [
        "Overview: Retry tonight.",
        "Bob: retry the deploy (action)",
        "Team: freeze Friday (takeaway)",
    ]


@pytest.mark.parametrize(
    "payload",
    [
        "not an object",
        {"overview": "x", "toDoList": "nope"},
        {"overview": "x", "toDoList": ["nope"]},
        {"overview": "x", "toDoList": [{"person": "A", "task": "", "type": "action"}]},
        {"overview": "x", "toDoList": [{"person": "A", "task": "t", "type": "reminder"}]},
    ],
)
def test_malformed_payloads_raise_parse_error(payload):
    with pytest.raises(InsightsParseError):
        MeetingInsights.from_payload(payload)


def test_metadata_defaults_truncate_search_string():
    metadata = MeetingMetadata.defaults_for("x" * 500)

    assert metadata.project_name == "General Discussion"
    assert metadata.department == "General"
    assert len(metadata.search_string) == 200


def test_composite_prompt_layout():
    prompt = build_composite_prompt("Be concise.", "Phoenix", "Context #1: earlier", "Alice will send it.")

    assert prompt.startswith("Be concise.\n\n--- HISTORICAL CONTEXT (Project: Phoenix) ---\nContext #1: earlier\n")
    assert "--- END OF HISTORICAL CONTEXT ---" in prompt
    assert "--- CURRENT MEETING TRANSCRIPT ---\nAlice will send it.\n---" in prompt
    assert prompt.rstrip().endswith("resolve any ambiguities in the current transcript.")
