"""
Assistant Operations

The upward operations consumed by the HTTP layer (and any other UI/CLI
collaborator):

  chat_with_model        explicit model, or the default fallback order
  rag_search             retrieval-augmented query on the fixed RAG model
  list_available_models  live model list; [] when the server is unreachable
  dwight_chat            persona chat, optionally retrieval-augmented
  analyze_audio          feature-vector analysis on the fixed analysis model
  check_connection       server reachability check

Every operation is stateless: unless a backend is injected, it builds its
own registry and client for the duration of the call. Failures surface as
AssistantError whose message is ready for direct display.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from config import Config
from inference import (
    AllModelsFailedError,
    FallbackOrchestrator,
    InferenceBackend,
    InferenceError,
    InferenceResult,
    ModelConfig,
    ModelRegistry,
    OllamaInferenceClient,
    StubInferenceClient,
    build_candidates,
)
from inference.errors import remediation_steps
from prompting import (
    build_audio_analysis_prompt,
    build_persona_prompt,
    build_rag_prompt,
    summarize_features,
)

logger = logging.getLogger(__name__)

AUDIO_RECOMMENDATIONS = [
    "Consider applying noise reduction if background noise is high",
    "Use trigger detection for automated monitoring",
    "Enable continuous recording for security applications",
]


class AssistantError(Exception):
    """An operation failed; ``str(error)`` is the display-ready message."""

    def __init__(self, message: str, cause: Optional[InferenceError] = None):
        super().__init__(message)
        self.cause = cause


def create_backend(registry: Optional[ModelRegistry] = None) -> InferenceBackend:
    """Build a fresh inference client for the configured LLM_BACKEND."""
    registry = registry if registry is not None else ModelRegistry()
    if Config.LLM_BACKEND == "stub":
        return StubInferenceClient(registry=registry)
    return OllamaInferenceClient(registry=registry)


def _describe_failure(error: AllModelsFailedError) -> str:
    # A single-candidate route reports its one underlying error plus the
    # fix-it steps for that model.
    if len(error.attempts) == 1:
        model_id, cause = error.attempts[0]
        return f"{cause}\n\n{remediation_steps(model_id)}"
    return error.user_message()


async def _run(backend: Optional[InferenceBackend], prompt: str, candidates: Sequence[str]) -> InferenceResult:
    orchestrator = FallbackOrchestrator(backend if backend is not None else create_backend())
    return await orchestrator.try_models(prompt, candidates)


async def chat_with_model(
    prompt: str,
    model: Optional[str] = None,
    backend: Optional[InferenceBackend] = None,
) -> InferenceResult:
    """Chat with an explicit model, or try the default candidates in order."""
    try:
        return await _run(backend, prompt, build_candidates(model))
    except AllModelsFailedError as e:
        if model:
            raise AssistantError(f"Model '{model}' error: {_describe_failure(e)}", e) from e
        raise AssistantError(e.user_message(), e) from e


async def rag_search(
    query: str,
    context_documents: Sequence[str],
    backend: Optional[InferenceBackend] = None,
) -> InferenceResult:
    """Answer ``query`` from the supplied documents using the designated RAG model."""
    prompt = build_rag_prompt(query, context_documents)
    try:
        return await _run(backend, prompt, [Config.RAG_MODEL])
    except AllModelsFailedError as e:
        raise AssistantError(f"RAG error: {_describe_failure(e)}", e) from e


async def list_available_models(backend: Optional[InferenceBackend] = None) -> List[ModelConfig]:
    """
    Models the server actually has, plus a "RAG Search" entry when any exist.

    An unreachable or misbehaving server is a normal degraded state: the
    result is an empty list rather than an error.
    """
    registry = ModelRegistry()
    backend = backend if backend is not None else create_backend(registry)

    try:
        return await registry.refresh_from_server(backend)
    except InferenceError as e:
        logger.warning(f"Failed to connect to Ollama: {e}")
        return []


async def dwight_chat(
    user_input: str,
    use_advanced_model: bool = False,
    context_documents: Optional[Sequence[str]] = None,
    backend: Optional[InferenceBackend] = None,
) -> InferenceResult:
    """
    Persona-driven chat.

    With ``use_advanced_model`` and context documents, the persona prompt is
    routed through the retrieval-augmented path; otherwise it tries the
    default candidates.
    """
    persona_prompt = build_persona_prompt(user_input)

    if use_advanced_model and context_documents is not None:
        prompt = build_rag_prompt(persona_prompt, context_documents)
        candidates = [Config.RAG_MODEL]
    else:
        prompt = persona_prompt
        candidates = build_candidates()

    try:
        return await _run(backend, prompt, candidates)
    except AllModelsFailedError as e:
        raise AssistantError(f"Enhanced chat error: {_describe_failure(e)}", e) from e


async def analyze_audio(
    audio_features: Sequence[float],
    audio_metadata: Any = None,
    backend: Optional[InferenceBackend] = None,
) -> Dict[str, Any]:
    """
    Analyze a non-empty amplitude feature vector.

    Raises:
        ValueError: ``audio_features`` is empty
        AssistantError: the analysis model could not answer
    """
    summary = summarize_features(audio_features)
    prompt = build_audio_analysis_prompt(summary, audio_metadata)

    try:
        result = await _run(backend, prompt, [Config.AUDIO_ANALYSIS_MODEL])
    except AllModelsFailedError as e:
        raise AssistantError(f"Audio analysis error: {_describe_failure(e)}", e) from e

    return {
        "analysis": result.text,
        "confidence": result.confidence,
        "processing_time_ms": result.processing_time_ms,
        "audio_features": summary.to_dict(),
        "recommendations": list(AUDIO_RECOMMENDATIONS),
    }


async def check_connection(backend: Optional[InferenceBackend] = None) -> Dict[str, Any]:
    """Query the listing endpoint. Never raises."""
    backend = backend if backend is not None else create_backend()

    try:
        names = await backend.list_model_names()
    except InferenceError as e:
        logger.warning(f"Ollama connection check failed: {e}")
        return {"status": "unavailable", "base_url": Config.OLLAMA_BASE_URL, "error": str(e)}

    return {"status": "ok", "base_url": Config.OLLAMA_BASE_URL, "model_count": len(names)}
