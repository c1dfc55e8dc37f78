"""
Model boundary layer for LLM inference.

This package provides a resilient path from a prompt to a text response
when the local inference server may be offline, may lack the requested
model, or may know a model family under several alias names.

Supported backends:
- StubInferenceClient: Deterministic fake client (default for CI/tests)
- OllamaInferenceClient: Local Ollama inference over HTTP

Example usage:
    from inference import FallbackOrchestrator, StubInferenceClient, build_candidates

    orchestrator = FallbackOrchestrator(StubInferenceClient())
    result = await orchestrator.try_models("Hello, world!", build_candidates())
"""

from .types import (
    DEFAULT_CANDIDATES,
    DEFAULT_CONFIDENCE,
    InferenceResult,
    ModelConfig,
    ModelFamily,
    RetrievalContext,
    estimate_tokens,
)
from .errors import (
    AllModelsFailedError,
    InferenceConnectionError,
    InferenceError,
    ModelUnavailableError,
)
from .base import InferenceBackend
from .fallback import FallbackOrchestrator, build_candidates
from .registry import ModelRegistry, builtin_catalog, classify_model_name
from .stub import StubInferenceClient
from .ollama import OllamaInferenceClient

__all__ = [
    "DEFAULT_CONFIDENCE",
    "InferenceResult",
    "ModelConfig",
    "ModelFamily",
    "RetrievalContext",
    "estimate_tokens",
    "AllModelsFailedError",
    "InferenceConnectionError",
    "InferenceError",
    "ModelUnavailableError",
    "InferenceBackend",
    "DEFAULT_CANDIDATES",
    "FallbackOrchestrator",
    "build_candidates",
    "ModelRegistry",
    "builtin_catalog",
    "classify_model_name",
    "StubInferenceClient",
    "OllamaInferenceClient",
]
