import json

import pytest
from fastapi.testclient import TestClient

from transcript_ingestor.api import app as api
from transcript_ingestor.ingestor import FetchFailure, VideoDetails


@pytest.fixture
def client(monkeypatch):
    calls = []

    def fake_get_video_details(video_id, lang="en", config=None, **_):
        calls.append((video_id, lang))
        return VideoDetails(video_title="Title", transcript="Hello")

    monkeypatch.setattr(api, "get_video_details", fake_get_video_details)
    test_client = TestClient(api.app)
    test_client.calls = calls
    return test_client


def test_get_returns_pretty_json(client):
    response = client.get("/", params={"video_id": "abc123"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.text == json.dumps({"videoTitle": "Title", "transcript": "Hello"}, indent=2)
    assert client.calls == [("abc123", "en")]


def test_post_with_lang(client):
    response = client.post("/", params={"video_id": "abc123", "lang": "de"})

    assert response.json() == {"videoTitle": "Title", "transcript": "Hello"}
    assert client.calls == [("abc123", "de")]


@pytest.mark.parametrize("params", [{}, {"video_id": ""}])
def test_missing_video_id(client, params):
    response = client.get("/", params=params)

    assert response.status_code == 200
    assert response.json() == {"error": "Missing video_id parameter"}
    assert client.calls == []


def test_fetch_failure_shape(client, monkeypatch):
    monkeypatch.setattr(api, "get_video_details", lambda *a, **k: FetchFailure(message="boom"))
    response = client.get("/", params={"video_id": "abc123"})

    assert response.json() == {"error": "Unable to fetch video details.", "message": "boom"}


def test_form_encoded_post(client):
    response = client.post("/", data={"video_id": "abc123", "lang": "fr"})

    assert response.json() == {"videoTitle": "Title", "transcript": "Hello"}
    assert client.calls == [("abc123", "fr")]


def test_form_fields_override_query(client):
    client.post("/?video_id=from-query&lang=de", data={"video_id": "from-form"})

    assert client.calls == [("from-form", "de")]


def test_invalid_configuration_answers_with_json(client, monkeypatch):
    monkeypatch.setattr(api.Config, "TIMEOUT", -1.0)
    response = client.get("/", params={"video_id": "abc123"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    payload = response.json()
    assert payload["error"] == "Invalid configuration."
    assert "timeout" in payload["message"]
    assert client.calls == []
