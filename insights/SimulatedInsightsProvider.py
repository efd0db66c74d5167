# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-19
# Description: SimulatedInsightsProvider
# -----------------------------------------------------------------------------
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from insights.types import UNASSIGNED_PERSON, MeetingInsights, MeetingMetadata, ToDoItem
from utility.logging_utils import get_class_logger

_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+|\n+")
_SPEAKER_LABEL = re.compile(r"^\s*(?P<speaker>[A-Z][\w'-]*(?: [A-Z][\w'-]*)?)\s*:\s*(?P<rest>.*)$")
_COMMITMENT = re.compile(
    r"^(?P<person>[A-Z][\w'-]*)\s+"
    r"(?:will|agreed to|agrees to|needs to|is going to|should|must|has to|volunteered to|offered to)\s+"
    r"(?P<task>.+?)[.!?]*$"
)
_DECISION = re.compile(r"\b(decided|decision|agreed that|approved|concluded)\b", re.IGNORECASE)
_PROJECT = re.compile(r"\b(?:[Pp]roject\s+(?P<after>[A-Z][\w-]*)|(?P<before>[A-Z][\w-]*)\s+project)\b")

# Subjects that do not name a person
_NON_PERSONS = {"I", "We", "You", "They", "He", "She", "It", "Someone", "Somebody", "Everyone", "Team", "This", "That"}

DEPARTMENTS = (
    "Engineering",
    "Marketing",
    "Sales",
    "Finance",
    "Product",
    "Operations",
    "Legal",
    "Design",
    "Support",
    "HR",
)


@dataclass
class SimulatedInsightsProvider:
    """
    Offline provider: deterministic, rule-based metadata and insights.
    "<Name> will|agreed to|needs to ... <task>" becomes an action for <Name>;
    sentences recording a decision become takeaways for "Team".
    """

    name: str = "simulated"
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    @staticmethod
    def _sentences(transcript: str) -> List[str]:
        return [s.strip() for s in _SENTENCE_SPLIT.split(transcript or "") if s.strip()]

    @staticmethod
    def _project_name(transcript: str) -> Optional[str]:
        m = _PROJECT.search(transcript or "")
        if not m:
            return None
        return m.group("after") or m.group("before")

    @staticmethod
    def _department(transcript: str) -> Optional[str]:
        for dept in DEPARTMENTS:
            if re.search(rf"\b{re.escape(dept)}\b", transcript or "", re.IGNORECASE):
                return dept
        return None

    def extract_metadata(self, transcript: str) -> MeetingMetadata:
        payload = {
            "projectName": self._project_name(transcript),
            "department": self._department(transcript),
            "searchString": None,
        }
        metadata = MeetingMetadata.from_payload(payload, transcript)
        self.logger.info(
            "Simulated metadata: project=%r department=%r", metadata.project_name, metadata.department
        )
        return metadata

    def _classify(self, sentence: str) -> Optional[Tuple[str, str, str]]:
        speaker = None
        label = _SPEAKER_LABEL.match(sentence)
        if label:
            speaker, sentence = label.group("speaker"), label.group("rest").strip()

        m = _COMMITMENT.match(sentence)
        if m:
            person = m.group("person")
            if person == "I" and speaker:
                person = speaker
            elif person in _NON_PERSONS:
                person = UNASSIGNED_PERSON
            return person, m.group("task").strip(), "action"

        if _DECISION.search(sentence):
            return "Team", sentence.rstrip(".!?"), "takeaway"

        return None

    def generate_insights(self, transcript: str, system_prompt: str) -> MeetingInsights:
        sentences = self._sentences(transcript)

        items: List[ToDoItem] = []
        for sentence in sentences:
            hit = self._classify(sentence)
            if hit:
                person, task, kind = hit
                items.append(ToDoItem(person=person, task=task, type=kind))

        actions = sum(1 for it in items if it.type == "action")
        overview = (
            f"Meeting covered {len(sentences)} statement(s), "
            f"with {actions} action item(s) and {len(items) - actions} key takeaway(s) identified."
        )

        self.logger.info("Simulated insights: sentences=%d items=%d", len(sentences), len(items))
        return MeetingInsights.from_payload(
            {
                "overview": overview,
                "toDoList": [{"person": it.person, "task": it.task, "type": it.type} for it in items],
            }
        )
