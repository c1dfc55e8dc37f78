"""
AI Routes Tests

HTTP-level tests for the /ai router and app health endpoints, run against
the stub inference backend (no network).

  - Success paths return InferenceResponse / report bodies
  - AssistantError maps to 503 with a display-ready detail
  - Listing failures return an empty list with 200
  - Request validation (empty audio features → 422)
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from config import Config
from inference import DEFAULT_CANDIDATES, InferenceConnectionError, StubInferenceClient
from main import app

# Create test client
client = TestClient(app)


def refused():
    return InferenceConnectionError("http://localhost:11434/api/generate", OSError("refused"))


@pytest.fixture
def stub_backend():
    with patch.object(Config, "LLM_BACKEND", "stub"):
        yield


def use_backend(backend):
    return patch("services.assistant.create_backend", lambda registry=None: backend)


class TestChatRoute:
    def test_chat_default_model(self, stub_backend):
        response = client.post("/ai/chat", json={"prompt": "hello there"})

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == StubInferenceClient.DEFAULT_TEXT
        assert body["tokens_used"] == 2
        assert body["confidence"] == 0.85
        assert body["model_id"] == DEFAULT_CANDIDATES[0]

    def test_chat_unknown_model_is_503(self, stub_backend):
        response = client.post("/ai/chat", json={"prompt": "hi", "model": "ghost"})

        assert response.status_code == 503
        assert response.json()["detail"].startswith("Model 'ghost' error:")

    def test_chat_all_failed_detail_has_remediation(self):
        backend = StubInferenceClient(outcomes={m: refused() for m in DEFAULT_CANDIDATES})

        with use_backend(backend):
            response = client.post("/ai/chat", json={"prompt": "hi"})

        assert response.status_code == 503
        assert "ollama serve" in response.json()["detail"]

    def test_chat_requires_prompt(self):
        response = client.post("/ai/chat", json={})
        assert response.status_code == 422


class TestRagRoute:
    def test_rag_success(self, stub_backend):
        response = client.post("/ai/rag", json={"query": "q", "context_documents": ["A", "B"]})

        assert response.status_code == 200
        assert response.json()["model_id"] == Config.RAG_MODEL

    def test_rag_failure(self):
        backend = StubInferenceClient(outcomes={Config.RAG_MODEL: refused()})

        with use_backend(backend):
            response = client.post("/ai/rag", json={"query": "q", "context_documents": ["A"]})

        assert response.status_code == 503
        assert response.json()["detail"].startswith("RAG error:")


class TestModelsRoute:
    def test_models_listed(self):
        backend = StubInferenceClient(model_names=["llama3.2:1b"])

        with use_backend(backend):
            response = client.get("/ai/models")

        assert response.status_code == 200
        body = response.json()
        assert [m["display_name"] for m in body] == ["Llama (llama3.2:1b)", "RAG Search"]
        assert body[0]["family"] == "llama"

    def test_models_unreachable_is_empty_list(self):
        backend = StubInferenceClient(model_names=refused())

        with use_backend(backend):
            response = client.get("/ai/models")

        assert response.status_code == 200
        assert response.json() == []


class TestDwightRoute:
    def test_dwight_with_documents(self, stub_backend):
        response = client.post(
            "/ai/dwight",
            json={"user_input": "hi", "use_advanced_model": True, "context_documents": ["doc"]},
        )

        assert response.status_code == 200
        assert response.json()["model_id"] == Config.RAG_MODEL


class TestAudioAnalysisRoute:
    def test_audio_analysis(self, stub_backend):
        response = client.post(
            "/ai/audio-analysis",
            json={"audio_features": [1.0, -1.0, 1.0, -1.0], "audio_metadata": {"source": "mic"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["audio_features"]["zero_crossings"] == 3
        assert body["audio_features"]["sample_count"] == 4
        assert len(body["recommendations"]) == 3

    def test_empty_features_rejected(self, stub_backend):
        response = client.post("/ai/audio-analysis", json={"audio_features": []})
        assert response.status_code == 422


class TestHealthRoutes:
    def test_live(self):
        assert client.get("/health/live").json() == {"status": "alive"}

    def test_ready(self):
        assert client.get("/health/ready").json() == {"status": "ready"}

    def test_not_ready_on_bad_config(self):
        with patch.object(Config, "LLM_BACKEND", "carrier-pigeon"):
            body = client.get("/health/ready").json()
        assert body["status"] == "not_ready"
        assert "LLM_BACKEND" in body["reason"]

    def test_ai_health_unavailable(self):
        backend = StubInferenceClient(model_names=refused())

        with use_backend(backend):
            body = client.get("/ai/health").json()

        assert body["status"] == "unavailable"
