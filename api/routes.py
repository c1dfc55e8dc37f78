"""
AI Routes

Exposes the assistant operations over HTTP. This module is I/O only and
does NOT contain decision logic.

Responsibilities:
- Validate request payloads (pydantic)
- Call the matching assistant operation
- Map AssistantError to 503 with a display-ready detail message
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from inference import InferenceResult, ModelConfig
from services import (
    AssistantError,
    analyze_audio,
    chat_with_model,
    check_connection,
    dwight_chat,
    list_available_models,
    rag_search,
)

# Setup logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/ai", tags=["ai"])


class ChatRequest(BaseModel):
    prompt: str
    model: Optional[str] = None


class RagRequest(BaseModel):
    query: str
    context_documents: List[str] = Field(default_factory=list)


class DwightChatRequest(BaseModel):
    user_input: str
    use_advanced_model: bool = False
    context_documents: Optional[List[str]] = None


class AudioAnalysisRequest(BaseModel):
    audio_features: List[float] = Field(..., min_length=1)
    audio_metadata: Any = None


class InferenceResponse(BaseModel):
    text: str
    tokens_used: int
    processing_time_ms: int
    confidence: float
    model_id: Optional[str] = None

    @classmethod
    def from_result(cls, result: InferenceResult) -> "InferenceResponse":
        return cls(**result.to_dict())


class ModelInfo(BaseModel):
    identifier: str
    display_name: str
    family: str
    endpoint: Optional[str] = None
    local_path: Optional[str] = None
    enabled: bool = True

    @classmethod
    def from_config(cls, config: ModelConfig) -> "ModelInfo":
        return cls(**config.to_dict())


class AudioFeaturesInfo(BaseModel):
    avg_amplitude: float
    peak_amplitude: float
    zero_crossings: int
    sample_count: int


class AudioAnalysisResponse(BaseModel):
    analysis: str
    confidence: float
    processing_time_ms: int
    audio_features: AudioFeaturesInfo
    recommendations: List[str]


def _unavailable(error: AssistantError) -> HTTPException:
    logger.error(f"Assistant operation failed: {error}")
    return HTTPException(status_code=503, detail=str(error))


@router.post("/chat", response_model=InferenceResponse)
async def chat(request: ChatRequest):
    """Chat with the named model, or fall back through the default candidates."""
    try:
        result = await chat_with_model(request.prompt, request.model)
    except AssistantError as e:
        raise _unavailable(e)
    return InferenceResponse.from_result(result)


@router.post("/rag", response_model=InferenceResponse)
async def rag(request: RagRequest):
    """Retrieval-augmented query over caller-supplied documents."""
    try:
        result = await rag_search(request.query, request.context_documents)
    except AssistantError as e:
        raise _unavailable(e)
    return InferenceResponse.from_result(result)


@router.get("/models", response_model=List[ModelInfo])
async def models():
    """Installed models; empty when the inference server is unreachable."""
    configs = await list_available_models()
    return [ModelInfo.from_config(config) for config in configs]


@router.post("/dwight", response_model=InferenceResponse)
async def dwight(request: DwightChatRequest):
    """Persona chat, optionally grounded on context documents."""
    try:
        result = await dwight_chat(
            request.user_input,
            use_advanced_model=request.use_advanced_model,
            context_documents=request.context_documents,
        )
    except AssistantError as e:
        raise _unavailable(e)
    return InferenceResponse.from_result(result)


@router.post("/audio-analysis", response_model=AudioAnalysisResponse)
async def audio_analysis(request: AudioAnalysisRequest):
    """Analyze a finished amplitude feature vector."""
    try:
        report = await analyze_audio(request.audio_features, request.audio_metadata)
    except AssistantError as e:
        raise _unavailable(e)
    return report


@router.get("/health")
async def ai_health():
    """Inference server reachability."""
    return await check_connection()
