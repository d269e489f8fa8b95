"""HTTP surface of the playground service."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from playground_providers.playground import playground_cache
from playground_providers.registry import ApiService
from playground_providers.service.app import app
from playground_providers.service.app_parts.app_core import get_service_dep


@pytest.fixture()
def make_client():
    def make(service: ApiService) -> TestClient:
        app.dependency_overrides[get_service_dep] = lambda: service
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


def test_health(make_client):
    assert make_client(ApiService()).get("/api/health").json() == {"ok": True}


def test_providers_lists_configured_and_variants(make_client):
    body = make_client(ApiService({"openai": "sk"})).get("/api/providers").json()
    assert body["configured"] == ["openai", "weather"]
    assert body["playground"] == ["OpenAI", "Anthropic", "DeepSeek", "Perplexity", "Demo"]


def test_models_status_codes(make_client):
    client = make_client(ApiService({"anthropic": "ak"}))
    assert client.get("/api/models", params={"provider": "cohere"}).status_code == 404
    missing = client.get("/api/models", params={"provider": "openai"})
    assert missing.status_code == 400
    assert missing.json()["detail"] == "OpenAI API key is not configured"
    listed = client.get("/api/models", params={"provider": "Anthropic"}).json()
    assert listed["provider"] == "anthropic"
    assert len(listed["models"]) == 4


def test_models_upstream_failure_is_502(make_client, recorder, json_reply):
    rec = recorder(json_reply({"error": {"message": "Incorrect API key provided", "code": "invalid_api_key"}}, 401))
    client = make_client(ApiService({"openai": "sk"}, transport=rec.transport))
    res = client.get("/api/models", params={"provider": "openai"})
    assert res.status_code == 502
    assert res.json()["detail"]["status"] == 401
    assert res.json()["detail"]["code"] == "invalid_api_key"


def test_provider_connection_probe(make_client, recorder, json_reply):
    rec = recorder(json_reply({"status": "ok", "sources": []}))
    client = make_client(ApiService({"news": "nk"}, transport=rec.transport))
    assert client.get("/api/providers/news/test").json() == {"ok": True, "provider": "news"}
    assert client.get("/api/providers/weather/test").status_code == 404


def test_playground_post_and_cache(make_client, fast_demo):
    client = make_client(ApiService())
    payload = {"modelId": "demo-model", "provider": "Demo", "input": "hello", "inputFormat": "text"}
    first = client.post("/api/playground", json=payload)
    assert first.status_code == 200
    body = first.json()
    assert body["content"].startswith("This is a simulated response")
    assert body["metadata"]["model"] == "demo-model"
    assert "error" not in body
    assert client.get("/api/playground/cache").json() == {"size": 1}
    assert client.post("/api/playground", json=payload).json() == body
    assert client.delete("/api/playground/cache").json() == {"ok": True, "size": 0}
    assert playground_cache.size() == 0


def test_playground_errors_are_200_with_error_field(make_client):
    client = make_client(ApiService())
    res = client.post(
        "/api/playground",
        json={"model_id": "gpt-4", "provider": "OpenAI", "input": "hi", "max_tokens": 0},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["content"] == ""
    assert body["error"] == "OpenAI API error: OpenAI API key is not configured"
    assert body["metadata"]["confidence"] == 0


def test_playground_body_validation(make_client):
    client = make_client(ApiService())
    res = client.post("/api/playground", json={"provider": "Demo", "input": "x", "modelId": "m", "inputFormat": "yaml"})
    assert res.status_code == 422
