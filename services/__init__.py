"""
Assistant Services Module

Upward operations over the inference layer:
  - Chat with an explicit or fallback model
  - Retrieval-augmented search
  - Model listing
  - Persona chat
  - Audio feature analysis
"""

from .assistant import (
    AUDIO_RECOMMENDATIONS,
    AssistantError,
    analyze_audio,
    chat_with_model,
    check_connection,
    create_backend,
    dwight_chat,
    list_available_models,
    rag_search,
)

__all__ = [
    "AUDIO_RECOMMENDATIONS",
    "AssistantError",
    "analyze_audio",
    "chat_with_model",
    "check_connection",
    "create_backend",
    "dwight_chat",
    "list_available_models",
    "rag_search",
]
