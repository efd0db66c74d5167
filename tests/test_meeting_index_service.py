# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-19
# Description: test_meeting_index_service.py
# -----------------------------------------------------------------------------
import pytest

from conftest import TEST_DIM, FakeLocalEmbeddingProvider, FakeRemoteEmbeddingProvider
from embedding.MeetingEmbedder import MeetingEmbedder
from insights.types import MeetingInsights, ToDoItem
from services.MeetingIndexService import MeetingIndexService

DATE = "2026-01-20T09:00:00.000Z"
TRANSCRIPT = (
    "Alice: The Phoenix staging deploy failed twice because of the migration lock.\n"
    "Bob: I will retry it after hours tonight and post the logs in the channel.\n\n"
    "Carol: Finance wants the budget numbers by Friday, so please send drafts early."
)


def test_index_builds_deterministic_records(index_service, store):
    count = index_service.index(
        ["first note", "second note"], project_name="Phoenix", department="Engineering", date_iso=DATE
    )

    assert count == 2
    stored = store.namespaces["Phoenix"]
    assert sorted(stored) == [f"Phoenix-{DATE}-0", f"Phoenix-{DATE}-1"]

    rec = stored[f"Phoenix-{DATE}-1"]
    assert rec.metadata == {
        "project_name": "Phoenix",
        "department": "Engineering",
        "date": DATE,
        "chunk_index": 1,
        "text": "second note",
    }
    assert len(rec.vector) == TEST_DIM


def test_reindexing_same_input_is_idempotent(index_service, store):
    for _ in range(2):
        index_service.index_transcript(TRANSCRIPT, project_name="Phoenix", department="Engineering", date_iso=DATE)

    first_ids = store.upserts[0]["ids"]
    assert store.upserts[1]["ids"] == first_ids
    assert store.count("Phoenix") == len(first_ids)


def test_index_transcript_chunks_under_project_namespace(index_service, store, chunker):
    count = index_service.index_transcript(
        TRANSCRIPT, project_name="Phoenix", department="Engineering", date_iso=DATE
    )

    assert count == len(chunker.split_text(TRANSCRIPT))
    assert count > 1
    assert list(store.namespaces) == ["Phoenix"]


def test_vectors_are_adapted_to_store_dimension(store, adapter, chunker):
    # local fallback produces 4-dim vectors; the store wants TEST_DIM
    embedder = MeetingEmbedder(
        primary=FakeRemoteEmbeddingProvider(always_fail=True),
        fallback=FakeLocalEmbeddingProvider(dim=4),
    )
    service = MeetingIndexService(store=store, embedder=embedder, adapter=adapter, chunker=chunker)

    service.index(["one", "two"], project_name="Phoenix", department="General", date_iso=DATE)

    for rec in store.namespaces["Phoenix"].values():
        assert len(rec.vector) == TEST_DIM
        assert rec.vector[4:] == [0.0] * (TEST_DIM - 4)


def test_index_insights_uses_store_back_texts(index_service, store):
    insights = MeetingInsights(
        overview="Deploy retry planned.",
        to_do_list=[ToDoItem("Bob", "retry the deploy", "action")],
    )

    count = index_service.index_insights(insights, project_name="Phoenix", department="Engineering", date_iso=DATE)

    assert count == 2
    texts = sorted(r.metadata["text"] for r in store.namespaces["Phoenix"].values())
    assert texts == ["Bob: retry the deploy (action)", "Overview: Deploy retry planned."]


def test_empty_input_is_a_noop(index_service, store):
    assert index_service.index([], project_name="Phoenix", department="General", date_iso=DATE) == 0
    assert index_service.index(["  "], project_name="Phoenix", department="General", date_iso=DATE) == 0
    assert store.upserts == []


def test_upsert_errors_propagate(index_service, store):
    store.fail_upsert = True

    with pytest.raises(ConnectionError):
        index_service.index(["note"], project_name="Phoenix", department="General", date_iso=DATE)
