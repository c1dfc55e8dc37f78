"""
Configuration management for the Dwight AI gateway.

Loads environment variables from .env file and provides typed access to configuration.
"""

import os
from pathlib import Path
from typing import List
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the Dwight AI gateway."""

    # Gateway API Configuration
    AGENT_PORT = int(os.getenv("AGENT_PORT", "8000"))

    # LLM Backend Configuration
    LLM_BACKEND = os.getenv("LLM_BACKEND", "ollama")
    OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

    # Fixed per-call deadlines (seconds)
    GENERATE_TIMEOUT_S = 30.0
    LIST_TIMEOUT_S = 5.0

    # Single-model routes
    RAG_MODEL = os.getenv("RAG_MODEL", "llama3-8b")
    AUDIO_ANALYSIS_MODEL = os.getenv("AUDIO_ANALYSIS_MODEL", "mixtral-8x7b")

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    SUPPORTED_BACKENDS = ("ollama", "stub")

    @classmethod
    def generate_url(cls) -> str:
        return f"{cls.OLLAMA_BASE_URL.rstrip('/')}/api/generate"

    @classmethod
    def tags_url(cls) -> str:
        return f"{cls.OLLAMA_BASE_URL.rstrip('/')}/api/tags"

    @classmethod
    def problems(cls) -> List[str]:
        """Return a list of human-readable configuration problems."""
        problems = []

        parsed = urlparse(cls.OLLAMA_BASE_URL)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            problems.append(f"OLLAMA_BASE_URL is not an http(s) URL: {cls.OLLAMA_BASE_URL!r}")
        if cls.LLM_BACKEND not in cls.SUPPORTED_BACKENDS:
            problems.append(
                f"LLM_BACKEND must be one of {', '.join(cls.SUPPORTED_BACKENDS)}, "
                f"got {cls.LLM_BACKEND!r}"
            )

        return problems

    @classmethod
    def validate(cls) -> bool:
        """Validate that configuration is usable."""
        problems = cls.problems()

        if problems:
            print("⚠️  Invalid configuration:")
            for problem in problems:
                print(f"   - {problem}")
            print("   Please fix them in .env file")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Ollama Base URL: {Config.OLLAMA_BASE_URL}")
    print(f"  LLM Backend: {Config.LLM_BACKEND}")
    print(f"  Timeouts: generate={Config.GENERATE_TIMEOUT_S}s list={Config.LIST_TIMEOUT_S}s")
    print(f"  Agent Port: {Config.AGENT_PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
