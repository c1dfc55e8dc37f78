from abc import ABC, abstractmethod
from typing import List

from .types import InferenceResult


class InferenceBackend(ABC):
    """
    Abstract inference boundary.
    Orchestration code must depend ONLY on this interface.

    Implementations issue exactly one request per call and never retry;
    retry and fallback belong to the FallbackOrchestrator.
    """

    @abstractmethod
    async def generate(self, prompt: str, model_id: str) -> InferenceResult:
        """Generate a response from one named model."""
        raise NotImplementedError

    @abstractmethod
    async def list_model_names(self) -> List[str]:
        """Return the model names installed on the server."""
        raise NotImplementedError
