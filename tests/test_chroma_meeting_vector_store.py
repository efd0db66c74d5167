# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-16
# Description: test_chroma_meeting_vector_store.py
# -----------------------------------------------------------------------------
from uuid import uuid4

import chromadb
import pytest
from chromadb.config import Settings

from config.Config import Config
from conftest import hashed_vector
from vectorstore.ChromaMeetingVectorStore import ChromaMeetingVectorStore, build_where
from vectorstore.IndexRecord import IndexRecord

DIM = 8


@pytest.fixture(scope="session")
def chroma_client():
    return chromadb.EphemeralClient(settings=Settings(anonymized_telemetry=False))


@pytest.fixture
def chroma_store(chroma_client):
    return ChromaMeetingVectorStore(
        cfg=Config(),
        collection_name=f"test-{uuid4().hex[:12]}",
        client=chroma_client,
    )


def _record(project, dept, idx, text, date="2026-01-20T09:00:00.000Z"):
    return IndexRecord(
        id=IndexRecord.make_id(project, date, idx),
        vector=hashed_vector(text, DIM),
        metadata={"project_name": project, "department": dept, "date": date, "chunk_index": idx, "text": text},
    )


def test_build_where_combines_clauses():
    assert build_where(None, None) is None
    assert build_where("Phoenix", None) == {"namespace": {"$eq": "Phoenix"}}
    assert build_where(None, {"department": "Sales"}) == {"department": {"$eq": "Sales"}}
    assert build_where("Phoenix", {"department": "Sales"}) == {
        "$and": [{"namespace": {"$eq": "Phoenix"}}, {"department": {"$eq": "Sales"}}]
    }


def test_connection_and_empty_query(chroma_store):
    assert chroma_store.test_connection()
    assert chroma_store.query(hashed_vector("anything", DIM), top_k=3) == []


def test_upsert_is_idempotent_by_id(chroma_store):
    rec = _record("Phoenix", "Engineering", 0, "Staging deploy failed on the migration lock")

    chroma_store.upsert("Phoenix", [rec])
    chroma_store.upsert("Phoenix", [rec])

    assert chroma_store.count("Phoenix") == 1
    assert chroma_store.count() == 1


def test_query_scopes_by_namespace_and_filter(chroma_store):
    chroma_store.upsert(
        "Phoenix",
        [
            _record("Phoenix", "Engineering", 0, "Staging deploy failed on the migration lock"),
            _record("Phoenix", "Finance", 1, "Budget numbers due Friday"),
        ],
    )
    chroma_store.upsert("Atlas", [_record("Atlas", "Engineering", 0, "Atlas migration planning")])

    query = hashed_vector("migration lock deploy", DIM)

    scoped = chroma_store.query(query, top_k=5, namespace="Phoenix", where={"department": "Engineering"})
    assert [m.metadata["project_name"] for m in scoped] == ["Phoenix"]
    assert scoped[0].text == "Staging deploy failed on the migration lock"
    assert scoped[0].metadata["chunk_index"] == 0

    project_only = chroma_store.query(query, top_k=5, namespace="Phoenix")
    assert {m.metadata["department"] for m in project_only} == {"Engineering", "Finance"}

    everywhere = chroma_store.query(query, top_k=5, where={"department": "Engineering"})
    assert {m.metadata["project_name"] for m in everywhere} == {"Phoenix", "Atlas"}

    assert chroma_store.query(query, top_k=5, namespace="Unknown") == []


def test_scores_are_similarities(chroma_store):
    text = "Alice will send the report by Friday"
    chroma_store.upsert("Phoenix", [_record("Phoenix", "General", 0, text)])

    matches = chroma_store.query(hashed_vector(text, DIM), top_k=1, namespace="Phoenix")

    assert matches[0].score == pytest.approx(1.0, abs=1e-3)


def test_delete_namespace(chroma_store):
    chroma_store.upsert("Phoenix", [_record("Phoenix", "General", i, f"note {i}") for i in range(3)])
    chroma_store.upsert("Atlas", [_record("Atlas", "General", 0, "atlas note")])

    assert chroma_store.delete_namespace("Phoenix") == 3
    assert chroma_store.count("Phoenix") == 0
    assert chroma_store.count("Atlas") == 1
    assert chroma_store.delete_namespace("Phoenix") == 0


def test_rejects_bad_input(chroma_store):
    assert chroma_store.upsert("Phoenix", []) == 0
    with pytest.raises(ValueError):
        chroma_store.upsert("", [_record("Phoenix", "General", 0, "x")])
    with pytest.raises(ValueError):
        chroma_store.query(hashed_vector("x", DIM), top_k=0)
