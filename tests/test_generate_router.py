"""HTTP layer — status codes and envelopes of the /api endpoints."""

from __future__ import annotations

import logging
from unittest.mock import patch

from fastapi.testclient import TestClient

from careerflow.main import create_app
from careerflow.models.request_models import RequestKind
from tests.conftest import _make_llm, _make_settings, _sent_messages


def test_generate_returns_enhanced_text(client):
    mock_llm = _make_llm("```\nResults-driven engineer who shipped 3 production apps.\n```")

    with patch("careerflow.agents.completion_client.ChatOpenAI", return_value=mock_llm):
        resp = client.post("/api/generate", json={"text": "Built 3 apps.", "type": "summary"})

    assert resp.status_code == 200
    assert resp.json() == {"enhancedText": "Results-driven engineer who shipped 3 production apps."}

    user_message = _sent_messages(mock_llm)[1]
    assert "Built 3 apps." in user_message.content


def test_generate_with_context(client):
    mock_llm = _make_llm('Feedback: {"score": 80, "feedback": "Solid", "improvement": "", "example": ""}')
    body = {
        "text": "Indexes speed up reads.",
        "type": "interview_feedback",
        "context": {"role": "Backend Engineer", "question": "What is an index?"},
    }

    with patch("careerflow.agents.completion_client.ChatOpenAI", return_value=mock_llm):
        resp = client.post("/api/generate", json=body)

    assert resp.status_code == 200
    assert resp.json()["enhancedText"].startswith('{"score": 80')


def test_missing_api_key_is_500(client):
    with patch(
        "careerflow.routers.generate_router.get_settings",
        return_value=_make_settings(groq_api_key=""),
    ):
        resp = client.post("/api/generate", json={"text": "x", "type": "summary"})

    assert resp.status_code == 500
    assert "GROQ_API_KEY" in resp.json()["error"]


def test_unknown_type_is_500(client):
    resp = client.post("/api/generate", json={"text": "x", "type": "haiku"})

    assert resp.status_code == 500
    assert "haiku" in resp.json()["error"]


def test_malformed_body_is_500_with_error_envelope(client):
    resp = client.post("/api/generate", json={"text": "no type given"})

    assert resp.status_code == 500
    body = resp.json()
    assert set(body) == {"error"}
    assert "type" in body["error"]


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_kinds_catalogue(client):
    resp = client.get("/api/kinds")

    assert resp.status_code == 200
    kinds = {item["kind"]: item for item in resp.json()}
    assert set(kinds) == {k.value for k in RequestKind}
    assert kinds["quiz_gen"]["shape"] == "array"
    assert kinds["interview_question"]["required_context"] == ["role", "difficulty"]


def test_logs_show_latest_request_first(client):
    with patch("careerflow.agents.completion_client.ChatOpenAI", return_value=_make_llm("Hello!")):
        client.post("/api/generate", json={"text": "first", "type": "linkedin_message"})
        client.post("/api/generate", json={"text": "second", "type": "linkedin_post"})

    resp = client.get("/api/logs", params={"limit": 2})

    assert resp.status_code == 200
    entries = resp.json()
    assert [e["kind"] for e in entries] == ["linkedin_post", "linkedin_message"]
    assert entries[0]["text_length"] == len("second")
    assert all("second" not in str(entry) for entry in entries)


def test_logs_limit_returns_at_most_limit_entries(client):
    with patch("careerflow.agents.completion_client.ChatOpenAI", return_value=_make_llm("Hi")):
        for n in range(3):
            client.post("/api/generate", json={"text": f"bio {n}", "type": "linkedin_bio"})

    resp = client.get("/api/logs", params={"limit": 1})

    assert resp.status_code == 200
    assert len(resp.json()) == 1


def test_logs_rejects_out_of_range_limit(client):
    for limit in (0, -25, 201):
        resp = client.get("/api/logs", params={"limit": limit})

        assert resp.status_code == 500
        assert "limit" in resp.json()["error"]


def test_startup_is_logged_through_lifespan(caplog):
    app = create_app()

    with caplog.at_level(logging.INFO, logger="careerflow.main"):
        with TestClient(app) as test_client:
            assert test_client.get("/api/health").status_code == 200

    starts = [r for r in caplog.records if "CareerFlow starting" in r.getMessage()]
    assert len(starts) == 1
    assert "provider_configured=True" in starts[0].getMessage()
