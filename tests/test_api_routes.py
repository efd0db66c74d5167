# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-22
# Description: test_api_routes.py
# -----------------------------------------------------------------------------
import threading
import time

import pytest
from fastapi.testclient import TestClient

from api import dependencies
from api.main import app
from conftest import ScriptedInsightsProvider
from insights.SimulatedInsightsProvider import SimulatedInsightsProvider
from services.MeetingHealthService import MeetingHealthService
from services.MetadataExtractionService import MetadataExtractionService

TRANSCRIPT = "Alice will send the report by Friday. Bob agreed to review the budget."


@pytest.fixture
def client(make_pipeline, index_service, retrieval_service, store, embedder):
    provider = SimulatedInsightsProvider()
    app.dependency_overrides[dependencies.get_pipeline_service] = lambda: make_pipeline(provider)
    app.dependency_overrides[dependencies.get_index_service] = lambda: index_service
    app.dependency_overrides[dependencies.get_retrieval_service] = lambda: retrieval_service
    app.dependency_overrides[dependencies.get_metadata_service] = lambda: MetadataExtractionService(provider=provider)
    app.dependency_overrides[dependencies.get_health_service] = lambda: MeetingHealthService(
        store=store, embedder=embedder, vector_backend="memory", insights_provider="simulated"
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_deep_health(client):
    resp = client.get("/health/deep")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["results"] == {"vector_store": True, "embeddings": True}
    assert body["summary"] == {"total": 2, "passed": 2, "failed": 0}


def test_pipeline_endpoint(client):
    resp = client.post("/pipeline", json={"transcript": TRANSCRIPT})

    assert resp.status_code == 200
    body = resp.json()
    assert body["metadata"]["project_name"] == "General Discussion"
    assert {it["person"] for it in body["insights"]["to_do_list"]} >= {"Alice", "Bob"}
    assert body["stored_chunks"] == 1


def test_pipeline_stage_failure_maps_to_502(client, make_pipeline):
    failing = ScriptedInsightsProvider(insights_error=RuntimeError("upstream 500"))
    app.dependency_overrides[dependencies.get_pipeline_service] = lambda: make_pipeline(failing)

    resp = client.post("/pipeline", json={"transcript": TRANSCRIPT})

    assert resp.status_code == 502
    assert resp.json()["detail"]["stage"] == "generate_insights"


def test_pipeline_without_provider_maps_to_503(client, make_pipeline):
    app.dependency_overrides[dependencies.get_pipeline_service] = lambda: make_pipeline(None)

    resp = client.post("/pipeline", json={"transcript": TRANSCRIPT})

    assert resp.status_code == 503


def test_pipeline_blank_transcript_is_400(client):
    resp = client.post("/pipeline", json={"transcript": "   "})

    assert resp.status_code == 400


def test_index_defaults_and_retrieve(client):
    resp = client.post("/index", json={"documents": ["Budget review moved to Friday"]})

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["count"] == 1
    assert body["project_name"] == "General Discussion"
    assert body["department"] == "General"
    assert body["date_iso"].endswith("Z")

    resp = client.post(
        "/retrieve",
        json={"project_name": "General Discussion", "department": "General", "search_query": "budget", "k": 3},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["strategy"] == "project_department"
    assert body["context"] == "Context #1: Budget review moved to Friday"
    assert body["matches"][0]["metadata"]["chunk_index"] == 0


def test_retrieve_with_no_history_is_empty_not_error(client):
    resp = client.post(
        "/retrieve",
        json={"project_name": "Phoenix", "department": "Sales", "search_query": "anything"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"context": "", "strategy": None, "matches": []}


def test_metadata_endpoint(client):
    resp = client.post("/metadata", json={"transcript": "Update on Project Phoenix for marketing."})

    assert resp.status_code == 200
    assert resp.json() == {
        "project_name": "Phoenix",
        "department": "Marketing",
        "search_string": "Update on Project Phoenix for marketing.",
    }


def test_request_validation(client):
    assert client.post("/index", json={"documents": []}).status_code == 422
    assert client.post("/retrieve", json={"project_name": "P", "department": "D", "search_query": "q", "k": 0}).status_code == 422


def test_concurrent_first_requests_share_one_container(monkeypatch):
    builds = []

    class SlowContainer:
        def __init__(self, cfg=None):
            builds.append(cfg)
            time.sleep(0.2)

    monkeypatch.setattr(dependencies, "AppContainer", SlowContainer)
    monkeypatch.setattr(dependencies, "get_cfg", lambda: None)
    dependencies.reset_container()

    results = []
    threads = [threading.Thread(target=lambda: results.append(dependencies.get_container())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    try:
        assert len(builds) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)
    finally:
        dependencies.reset_container()
