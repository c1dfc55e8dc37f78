import logging
import time
from typing import Any, Dict, List, Optional

import httpx

from config import Config
from .base import InferenceBackend
from .errors import InferenceConnectionError, InferenceError, ModelUnavailableError
from .registry import ModelRegistry
from .types import DEFAULT_CONFIDENCE, InferenceResult, estimate_tokens

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response"

# Fixed sampling parameters sent with every generation request
SAMPLING_OPTIONS: Dict[str, Any] = {
    "temperature": 0.7,
    "top_p": 0.9,
    "max_tokens": 512,
}


def build_generate_payload(model_id: str, prompt: str) -> Dict[str, Any]:
    return {
        "model": model_id,
        "prompt": prompt,
        "stream": False,
        "options": dict(SAMPLING_OPTIONS),
    }


class OllamaInferenceClient(InferenceBackend):
    """
    Ollama client for local model inference.

    Uses /api/generate (non-streaming) for generation and /api/tags for
    listing. Each call opens its own httpx.AsyncClient with a fixed deadline
    and issues exactly one request.

    Outcome classification:
      - model unknown to the registry, or no endpoint → ModelUnavailableError,
        raised before any network I/O
      - transport failure (refused, timeout, DNS) → InferenceConnectionError
      - non-2xx status → ModelUnavailableError carrying the status
      - 2xx without a usable "response" field → text "No response"
    """

    def __init__(
        self,
        registry: Optional[ModelRegistry] = None,
        tags_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Ollama client.

        Args:
            registry:  Model registry used to resolve identifiers to endpoints
            tags_url:  Listing endpoint (defaults to <OLLAMA_BASE_URL>/api/tags)
            transport: Optional httpx transport (unit-test hook)
        """
        self.registry = registry if registry is not None else ModelRegistry()
        self.tags_url = tags_url or Config.tags_url()
        self.generate_timeout_s = Config.GENERATE_TIMEOUT_S
        self.list_timeout_s = Config.LIST_TIMEOUT_S
        self._transport = transport

    def _http_client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout, transport=self._transport)

    async def generate(self, prompt: str, model_id: str) -> InferenceResult:
        start_time = time.monotonic()

        config = self.registry.lookup(model_id)
        if config is None or not config.endpoint:
            raise ModelUnavailableError(model_id)

        payload = build_generate_payload(model_id, prompt)
        logger.debug(f"POST {config.endpoint} model={model_id} prompt_chars={len(prompt)}")

        try:
            async with self._http_client(self.generate_timeout_s) as client:
                response = await client.post(config.endpoint, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise InferenceConnectionError(config.endpoint, e) from e

        if not response.is_success:
            raise ModelUnavailableError(model_id, status_code=response.status_code)

        text = self._response_text(response)
        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(f"Model '{model_id}' responded in {elapsed_ms} ms ({len(text)} chars)")

        return InferenceResult(
            text=text,
            tokens_used=estimate_tokens(prompt),
            processing_time_ms=elapsed_ms,
            confidence=DEFAULT_CONFIDENCE,
            model_id=model_id,
        )

    @staticmethod
    def _response_text(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            logger.warning("Ollama returned a non-JSON body; using placeholder text")
            return NO_RESPONSE_TEXT

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            return NO_RESPONSE_TEXT
        return text

    async def list_model_names(self) -> List[str]:
        try:
            async with self._http_client(self.list_timeout_s) as client:
                response = await client.get(self.tags_url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise InferenceConnectionError(self.tags_url, e) from e

        if not response.is_success:
            raise InferenceError(f"Ollama returned status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise InferenceError(f"Failed to parse Ollama response: {e}") from e

        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            raise InferenceError("Invalid Ollama response format")

        return [
            model["name"]
            for model in models
            if isinstance(model, dict) and isinstance(model.get("name"), str)
        ]
