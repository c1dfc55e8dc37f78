from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, List, Dict, Any

# Placeholder until the server reports a real confidence metric.
DEFAULT_CONFIDENCE: float = 0.85

# Preference order when the caller names no model: quantized small variant
# first, bare family name last. Changing it changes observed latency.
DEFAULT_CANDIDATES = (
    "llama3.2:1b",
    "llama3.2",
    "llama3:8b",
    "llama3",
    "llama3-8b",
    "llama2:7b",
    "llama2",
    "llama",
)


class ModelFamily(str, Enum):
    """Coarse model classification used for registry bookkeeping."""
    LLAMA = "llama"
    MISTRAL = "mistral"
    GEMMA = "gemma"
    OTHER = "other"
    RAG = "rag"


@dataclass(frozen=True)
class ModelConfig:
    identifier: str               # registry key, also sent as the "model" field
    display_name: str
    family: ModelFamily
    endpoint: Optional[str] = None   # absent → unavailable
    local_path: Optional[str] = None
    enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["family"] = self.family.value
        return data


@dataclass
class InferenceResult:
    text: str
    tokens_used: int              # word count of the prompt, not real tokenization
    processing_time_ms: int
    confidence: float = DEFAULT_CONFIDENCE
    model_id: Optional[str] = None

    def __post_init__(self):
        if self.processing_time_ms < 0:
            raise ValueError("processing_time_ms must be >= 0")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be within [0, 1]")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RetrievalContext:
    query: str
    documents: List[str] = field(default_factory=list)


def estimate_tokens(prompt: str) -> int:
    """Whitespace word count of the prompt."""
    return len(prompt.split())
