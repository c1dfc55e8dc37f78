"""
tests/unit/test_model_registry.py

Unit tests for ModelRegistry.

Verifies:
✔ Built-in catalog carries the llama (enabled + disabled), mixtral and mistral entries
✔ All catalog entries point at the same generate endpoint
✔ list_enabled never returns a disabled entry
✔ Unknown identifiers resolve to None
✔ Family classification is case-insensitive and priority-ordered
✔ refresh_from_server synthesizes entries and appends "RAG Search" only when non-empty
✔ refresh_from_server propagates listing failures
"""

import pytest

from inference import (
    DEFAULT_CANDIDATES,
    InferenceConnectionError,
    ModelConfig,
    ModelFamily,
    ModelRegistry,
    StubInferenceClient,
    builtin_catalog,
    classify_model_name,
)

ENDPOINT = "http://ollama.test:11434/api/generate"


class TestBuiltinCatalog:
    def test_named_entries_present(self):
        registry = ModelRegistry(endpoint=ENDPOINT)

        assert registry.lookup("llama3-8b").family == ModelFamily.LLAMA
        assert registry.lookup("llama3-70b").family == ModelFamily.LLAMA
        assert registry.lookup("mixtral-8x7b").family == ModelFamily.MISTRAL
        assert registry.lookup("mistral-7b").family == ModelFamily.MISTRAL

    def test_large_llama_disabled_by_default(self):
        registry = ModelRegistry(endpoint=ENDPOINT)

        assert registry.lookup("llama3-8b").enabled is True
        assert registry.lookup("llama3-70b").enabled is False

    def test_entries_share_endpoint(self):
        catalog = builtin_catalog(ENDPOINT)
        assert {config.endpoint for config in catalog} == {ENDPOINT}

    def test_default_candidates_are_registered(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        for alias in DEFAULT_CANDIDATES:
            assert alias in registry

    def test_unknown_identifier_is_none(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        assert registry.lookup("definitely-not-a-model") is None


class TestListEnabled:
    def test_disabled_entries_excluded(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        enabled = registry.list_enabled()

        assert enabled
        assert all(config.enabled for config in enabled)
        assert "llama3-70b" not in [config.identifier for config in enabled]

    def test_custom_catalog_all_disabled(self):
        registry = ModelRegistry(
            catalog=[ModelConfig("a", "A", ModelFamily.OTHER, ENDPOINT, enabled=False)],
            endpoint=ENDPOINT,
        )
        assert registry.list_enabled() == []


class TestClassification:
    @pytest.mark.parametrize(
        "name, family",
        [
            ("llama3.2:1b", ModelFamily.LLAMA),
            ("CodeLlama:7b", ModelFamily.LLAMA),
            ("mistral:latest", ModelFamily.MISTRAL),
            ("MIXTRAL:8x7b", ModelFamily.MISTRAL),
            ("gemma2:2b", ModelFamily.GEMMA),
            ("phi3:mini", ModelFamily.OTHER),
        ],
    )
    def test_keyword_families(self, name, family):
        assert classify_model_name(name) == family

    def test_llama_wins_over_later_keywords(self):
        assert classify_model_name("llama-mistral-merge") == ModelFamily.LLAMA


class TestRefreshFromServer:
    @pytest.mark.asyncio
    async def test_synthesizes_entries_and_rag(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        backend = StubInferenceClient(model_names=["llama3.2:1b", "mistral:7b", "gemma:2b", "phi3"])

        configs = await registry.refresh_from_server(backend)

        assert [c.display_name for c in configs] == [
            "Llama (llama3.2:1b)",
            "Mistral (mistral:7b)",
            "Gemma (gemma:2b)",
            "phi3",
            "RAG Search",
        ]
        assert configs[-1].family == ModelFamily.RAG
        assert all(c.endpoint == ENDPOINT for c in configs)
        assert all(c.enabled for c in configs)

    @pytest.mark.asyncio
    async def test_listed_models_are_not_registered(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        backend = StubInferenceClient(model_names=["qwen2:0.5b"])

        await registry.refresh_from_server(backend)

        assert registry.lookup("qwen2:0.5b") is None
        assert "qwen2:0.5b" not in registry

    @pytest.mark.asyncio
    async def test_empty_listing_has_no_rag_entry(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        configs = await registry.refresh_from_server(StubInferenceClient(model_names=[]))
        assert configs == []

    @pytest.mark.asyncio
    async def test_listing_failure_propagates(self):
        registry = ModelRegistry(endpoint=ENDPOINT)
        error = InferenceConnectionError("http://ollama.test:11434/api/tags", OSError("refused"))

        with pytest.raises(InferenceConnectionError):
            await registry.refresh_from_server(StubInferenceClient(model_names=error))
