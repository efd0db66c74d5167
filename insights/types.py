# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-17
# Description: types.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

import settings
from utility.errors import InsightsParseError

TODO_TYPES: Tuple[str, ...] = ("takeaway", "action")
UNASSIGNED_PERSON = "To be Assigned"
MISSING_OVERVIEW = "No overview generated"


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class MeetingMetadata:
    """Scope of one transcript: always fully populated, never blank."""

    project_name: str
    department: str
    search_string: str

    @staticmethod
    def defaults_for(transcript: str) -> "MeetingMetadata":
        search = (transcript or "")[: settings.SEARCH_STRING_FALLBACK_CHARS].strip()
        return MeetingMetadata(
            project_name=settings.DEFAULT_PROJECT_NAME,
            department=settings.DEFAULT_DEPARTMENT,
            search_string=search or settings.DEFAULT_PROJECT_NAME,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], transcript: str) -> "MeetingMetadata":
        """
        Accepts the model's JSON ({projectName, department, searchString}) and
        fills each blank field from the defaults on its own.
        """
        defaults = cls.defaults_for(transcript)
        return cls(
            project_name=_clean(payload.get("projectName")) or defaults.project_name,
            department=_clean(payload.get("department")) or defaults.department,
            search_string=_clean(payload.get("searchString")) or defaults.search_string,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "project_name": self.project_name,
            "department": self.department,
            "search_string": self.search_string,
        }


@dataclass(frozen=True)
class ToDoItem:
    person: str
    task: str
    type: str = "action"

    def __post_init__(self) -> None:
        if self.type not in TODO_TYPES:
            raise InsightsParseError(f"Unknown to-do type {self.type!r}; expected one of {TODO_TYPES}")

    def to_text(self) -> str:
        return f"{self.person}: {self.task} ({self.type})"


@dataclass(frozen=True)
class MeetingInsights:
    overview: str
    to_do_list: List[ToDoItem] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "MeetingInsights":
        """
        Build from the `extract_meeting_insights` tool arguments:
        {overview: str, toDoList: [{person, task, type}]}.
        Items come back sorted by person; blank people become "To be Assigned".
        """
        if not isinstance(payload, Mapping):
            raise InsightsParseError(f"Insights payload must be an object, got {type(payload).__name__}")

        raw_items = payload.get("toDoList") or []
        if not isinstance(raw_items, list):
            raise InsightsParseError("toDoList must be a list")

        items: List[ToDoItem] = []
        for i, raw in enumerate(raw_items):
            if not isinstance(raw, Mapping):
                raise InsightsParseError(f"toDoList[{i}] must be an object")
            task = _clean(raw.get("task"))
            if not task:
                raise InsightsParseError(f"toDoList[{i}] has no task")
            items.append(
                ToDoItem(
                    person=_clean(raw.get("person")) or UNASSIGNED_PERSON,
                    task=task,
                    type=_clean(raw.get("type")).lower() or "action",
                )
            )

        return cls(
            overview=_clean(payload.get("overview")) or MISSING_OVERVIEW,
            to_do_list=sorted(items, key=lambda it: it.person),
        )

    def to_texts(self) -> List[str]:
        """Texts fed back into the index so later meetings can retrieve these decisions."""
        return [f"Overview: {self.overview}"] + [item.to_text() for item in self.to_do_list]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overview": self.overview,
            "to_do_list": [
                {"person": it.person, "task": it.task, "type": it.type} for it in self.to_do_list
            ],
        }
