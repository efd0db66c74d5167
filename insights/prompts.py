# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-17
# Description: prompts.py
# -----------------------------------------------------------------------------
from typing import Any, Dict

import settings

DEFAULT_SYSTEM_PROMPT = "You are a helpful meeting assistant."

METADATA_SYSTEM_PROMPT = (
    "Extract metadata from the meeting transcript. "
    "Return JSON with: projectName, department, searchString. "
    "Rules: Always provide non-empty values. "
    f"Defaults: projectName='{settings.DEFAULT_PROJECT_NAME}', department='{settings.DEFAULT_DEPARTMENT}', "
    "searchString should summarize ambiguous terms requiring context."
)

INSIGHTS_TOOL_NAME = "extract_meeting_insights"

INSIGHTS_TOOL: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": INSIGHTS_TOOL_NAME,
        "description": (
            "Extracts structured meeting insights including Overview and To-Do List organized by person."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "overview": {
                    "type": "string",
                    "description": "A 2-3 sentence executive summary capturing focus and primary outcomes.",
                },
                "toDoList": {
                    "type": "array",
                    "description": (
                        "Combined key takeaways and action items, organized by person "
                        "and sorted by person alphabetically."
                    ),
                    "items": {
                        "type": "object",
                        "properties": {
                            "person": {
                                "type": "string",
                                "description": "Name of the person responsible (or 'To be Assigned' if unclear)",
                            },
                            "task": {
                                "type": "string",
                                "description": "The task or decision description",
                            },
                            "type": {
                                "type": "string",
                                "enum": ["takeaway", "action"],
                                "description": "Whether this is a key takeaway or actionable step",
                            },
                        },
                        "required": ["person", "task", "type"],
                    },
                },
            },
            "required": ["overview", "toDoList"],
        },
    },
}


# Same structure as the tool parameters, for providers with schema-constrained JSON output
INSIGHTS_SCHEMA: Dict[str, Any] = INSIGHTS_TOOL["function"]["parameters"]

METADATA_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectName": {"type": "string", "description": "Project discussed in the meeting"},
        "department": {"type": "string", "description": "Department or team that owns the meeting"},
        "searchString": {"type": "string", "description": "Ambiguous terms that need historical context"},
    },
    "required": ["projectName", "department", "searchString"],
}


def build_insights_user_message(transcript: str) -> str:
    return (
        "Analyze the following meeting transcript. "
        "Provide a concise summary and extract all action items.\n\n"
        f"Transcript:\n---\n{transcript}\n---"
    )


def build_composite_prompt(system_prompt: str, project_name: str, context: str, transcript: str) -> str:
    """
    Caller's system prompt + retrieved history + the current transcript.
    An empty context still produces the (empty) history block.
    """
    return (
        f"{system_prompt or DEFAULT_SYSTEM_PROMPT}\n\n"
        f"--- HISTORICAL CONTEXT (Project: {project_name}) ---\n"
        f"{context}\n"
        "--- END OF HISTORICAL CONTEXT ---\n\n"
        "--- CURRENT MEETING TRANSCRIPT ---\n"
        f"{transcript}\n"
        "---\n\n"
        "INSTRUCTIONS: Generate a detailed Summary, a specific To-Do List, and clear Action Items "
        "using Markdown. Use the historical context to resolve any ambiguities in the current transcript."
    )
