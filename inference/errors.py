"""
Error taxonomy for the inference boundary.

  InferenceError
  ├── InferenceConnectionError   transport failure reaching the server
  ├── ModelUnavailableError      server rejected the model, or registry has no entry
  └── AllModelsFailedError       every candidate in an ordered attempt list failed

Only AllModelsFailedError (and listing failures) surface to callers of the
upward operations; per-candidate failures are diagnostic while fallback runs.
"""

from typing import List, Optional, Sequence, Tuple

from .types import DEFAULT_CANDIDATES

INSTALL_URL = "https://ollama.ai"


class InferenceError(Exception):
    """Base class for all inference failures."""


class InferenceConnectionError(InferenceError):
    """The inference server could not be reached (refused, timeout, DNS)."""

    def __init__(self, endpoint: str, cause: BaseException):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(
            f"Failed to connect to Ollama at {endpoint}: {cause}. "
            "Make sure Ollama is running with 'ollama serve'"
        )


class ModelUnavailableError(InferenceError):
    """The server is reachable but lacks the model, or the model is not configured."""

    def __init__(
        self,
        model_id: str,
        status_code: Optional[int] = None,
    ):
        self.model_id = model_id
        self.status_code = status_code
        if status_code is not None:
            message = (
                f"Ollama returned error status: {status_code}. "
                f"Model '{model_id}' may not be available. Try 'ollama pull {model_id}'"
            )
        else:
            message = (
                f"Model '{model_id}' not configured. "
                "Available models can be checked with 'ollama list'. "
                f"Make sure Ollama is running with 'ollama serve' and try 'ollama pull {model_id}'"
            )
        super().__init__(message)


Attempt = Tuple[str, InferenceError]


class AllModelsFailedError(InferenceError):
    """Every candidate model failed; carries one (model_id, error) per attempt."""

    def __init__(self, attempts: Sequence[Attempt]):
        self.attempts: List[Attempt] = list(attempts)
        if self.attempts:
            model_id, error = self.attempts[-1]
            detail = f"Last error: Model '{model_id}' failed: {error}"
        else:
            detail = "No candidate models were given"
        super().__init__(f"All models failed after {len(self.attempts)} attempt(s). {detail}")

    @property
    def attempted_models(self) -> List[str]:
        return [model_id for model_id, _ in self.attempts]

    def user_message(self) -> str:
        """Display-ready message with remediation steps."""
        pull_target = self.attempted_models[0] if self.attempts else DEFAULT_CANDIDATES[0]
        return f"❌ Ollama AI models not available. {self}\n\n{remediation_steps(pull_target)}"


def remediation_steps(model_id: str) -> str:
    """Numbered fix-it steps shown under every user-facing inference failure."""
    return (
        "🔧 To fix this:\n"
        f"1. Install Ollama from {INSTALL_URL}\n"
        "2. Run: ollama serve\n"
        f"3. Pull models: ollama pull {model_id}\n"
        "4. Restart this application"
    )
