from typing import Dict, List, Optional, Sequence, Union

from .base import InferenceBackend
from .errors import InferenceError, ModelUnavailableError
from .registry import ModelRegistry
from .types import DEFAULT_CONFIDENCE, InferenceResult, estimate_tokens

Outcome = Union[str, InferenceError]


class StubInferenceClient(InferenceBackend):
    """
    Deterministic fake inference client for testing, CI and demo mode.

    Never touches the network. Every call is recorded in ``calls`` so tests
    can assert which candidates were (and were not) invoked.
    """

    DEFAULT_TEXT = "This is a stubbed response."

    def __init__(
        self,
        outcomes: Optional[Dict[str, Outcome]] = None,
        model_names: Union[Sequence[str], InferenceError, None] = None,
        registry: Optional[ModelRegistry] = None,
    ):
        """
        Args:
            outcomes:    model_id → response text, or an error to raise
            model_names: names reported by list_model_names, or an error to raise
            registry:    when given, unknown identifiers fail like the real client
        """
        self.outcomes = dict(outcomes or {})
        self.model_names = model_names
        self.registry = registry
        self.calls: List[str] = []
        self.prompts: List[str] = []

    async def generate(self, prompt: str, model_id: str) -> InferenceResult:
        self.calls.append(model_id)
        self.prompts.append(prompt)

        if self.registry is not None and self.registry.lookup(model_id) is None:
            raise ModelUnavailableError(model_id)

        outcome = self.outcomes.get(model_id, self.DEFAULT_TEXT)
        if isinstance(outcome, InferenceError):
            raise outcome

        return InferenceResult(
            text=outcome,
            tokens_used=estimate_tokens(prompt),
            processing_time_ms=0,
            confidence=DEFAULT_CONFIDENCE,
            model_id=model_id,
        )

    async def list_model_names(self) -> List[str]:
        if isinstance(self.model_names, InferenceError):
            raise self.model_names
        return list(self.model_names or [])
