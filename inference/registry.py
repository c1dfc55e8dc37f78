"""
Model Registry

Maps short model identifiers to connection metadata.

Seeded with a built-in catalog at construction; optionally refreshed from
the server's model-listing API. Registries are cheap and built per call:
nothing here is shared between requests.
"""

import logging
from typing import Dict, Iterable, List, Optional

from config import Config
from .base import InferenceBackend
from .types import DEFAULT_CANDIDATES, ModelConfig, ModelFamily

logger = logging.getLogger(__name__)

RAG_IDENTIFIER = "rag-search"

# Checked in order; first keyword hit wins.
_FAMILY_KEYWORDS = (
    (("llama",), ModelFamily.LLAMA, "Llama"),
    (("mistral", "mixtral"), ModelFamily.MISTRAL, "Mistral"),
    (("gemma",), ModelFamily.GEMMA, "Gemma"),
)


def classify_model_name(name: str) -> ModelFamily:
    """Classify a server-reported model name by case-insensitive keyword match."""
    lowered = name.lower()
    for keywords, family, _ in _FAMILY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return family
    return ModelFamily.OTHER


def _display_name(name: str, family: ModelFamily) -> str:
    for _, known_family, label in _FAMILY_KEYWORDS:
        if known_family is family:
            return f"{label} ({name})"
    return name


def builtin_catalog(endpoint: Optional[str] = None) -> List[ModelConfig]:
    """
    The static catalog.

    Besides the named catalog entries, every default fallback candidate is
    registered as a llama-family alias so the default list can reach the
    server. Anything else fails locally on lookup.
    """
    endpoint = endpoint or Config.generate_url()

    catalog = [
        ModelConfig("llama3-8b", "Llama 3 8B", ModelFamily.LLAMA, endpoint),
        # Disabled by default due to resource requirements
        ModelConfig("llama3-70b", "Llama 3 70B", ModelFamily.LLAMA, endpoint, enabled=False),
        ModelConfig("mixtral-8x7b", "Mixtral 8x7B", ModelFamily.MISTRAL, endpoint),
        ModelConfig("mistral-7b", "Mistral 7B", ModelFamily.MISTRAL, endpoint),
    ]

    known = {config.identifier for config in catalog}
    for alias in DEFAULT_CANDIDATES:
        if alias not in known:
            catalog.append(
                ModelConfig(alias, _display_name(alias, ModelFamily.LLAMA), ModelFamily.LLAMA, endpoint)
            )

    return catalog


class ModelRegistry:
    """Identifier → ModelConfig lookup table."""

    def __init__(self, catalog: Optional[Iterable[ModelConfig]] = None, endpoint: Optional[str] = None):
        self.endpoint = endpoint or Config.generate_url()
        if catalog is None:
            catalog = builtin_catalog(self.endpoint)
        self._models: Dict[str, ModelConfig] = {config.identifier: config for config in catalog}

    def __contains__(self, model_id: str) -> bool:
        return model_id in self._models

    def __len__(self) -> int:
        return len(self._models)

    def lookup(self, model_id: str) -> Optional[ModelConfig]:
        return self._models.get(model_id)

    def list_enabled(self) -> List[ModelConfig]:
        return [config for config in self._models.values() if config.enabled]

    async def refresh_from_server(self, backend: InferenceBackend) -> List[ModelConfig]:
        """
        Query the server's listing API and synthesize one entry per model.

        The lookup table is left untouched: listed names are informational
        and only catalog identifiers are chat-addressable. When at least one
        model was found, a synthetic "RAG Search" entry riding on the same
        endpoint is appended to the returned list.

        Raises:
            InferenceConnectionError: server unreachable
            InferenceError: listing rejected or malformed
        """
        names = await backend.list_model_names()
        logger.info(f"Successfully connected to Ollama, found {len(names)} models")

        discovered: List[ModelConfig] = []
        for name in names:
            family = classify_model_name(name)
            config = ModelConfig(
                identifier=name,
                display_name=_display_name(name, family),
                family=family,
                endpoint=self.endpoint,
            )
            discovered.append(config)

        if discovered:
            discovered.append(
                ModelConfig(RAG_IDENTIFIER, "RAG Search", ModelFamily.RAG, self.endpoint)
            )

        return discovered
