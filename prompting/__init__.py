"""Prompt assemblers: persona chat, retrieval-augmented queries, audio analysis."""

from .prompt_builder import (
    PERSONA_PREAMBLE,
    PERSONA_SUFFIX,
    RAG_INSTRUCTION,
    build_context_prompt,
    build_persona_prompt,
    build_rag_prompt,
)
from .audio_features import (
    AudioFeatureSummary,
    build_audio_analysis_prompt,
    count_zero_crossings,
    summarize_features,
)

__all__ = [
    "PERSONA_PREAMBLE",
    "PERSONA_SUFFIX",
    "RAG_INSTRUCTION",
    "build_context_prompt",
    "build_persona_prompt",
    "build_rag_prompt",
    "AudioFeatureSummary",
    "build_audio_analysis_prompt",
    "count_zero_crossings",
    "summarize_features",
]
