"""
Fallback Orchestrator

Sequential probing across an ordered list of candidate model identifiers.

Invariants:
- Candidates are tried strictly in order; the first success wins and no
  later candidate is invoked.
- Candidates are never tried in parallel: local inference servers
  serialize requests, so at most one call is in flight per invocation.
- A failed candidate is recorded once and never retried.
- Exhaustion raises AllModelsFailedError with one attempt per candidate.
"""

import logging
from typing import List, Optional, Sequence

from .base import InferenceBackend
from .errors import AllModelsFailedError, Attempt, InferenceError
from .types import DEFAULT_CANDIDATES, InferenceResult

logger = logging.getLogger(__name__)


def build_candidates(model_id: Optional[str] = None) -> List[str]:
    """A caller-supplied model is tried alone; otherwise the default order."""
    if model_id:
        return [model_id]
    return list(DEFAULT_CANDIDATES)


class FallbackOrchestrator:
    """Tries candidates one at a time through a single inference backend."""

    def __init__(self, backend: InferenceBackend):
        self.backend = backend

    async def try_models(self, prompt: str, candidates: Sequence[str]) -> InferenceResult:
        attempts: List[Attempt] = []

        for model_id in candidates:
            try:
                result = await self.backend.generate(prompt, model_id)
            except InferenceError as e:
                attempts.append((model_id, e))
                logger.warning(f"Trying next model after error: Model '{model_id}' failed: {e}")
                continue

            if attempts:
                logger.info(f"Model '{model_id}' answered after {len(attempts)} failed attempt(s)")
            return result

        error = AllModelsFailedError(attempts)
        logger.error(str(error))
        raise error
