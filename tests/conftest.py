"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config():
    """Pin endpoint and backend so a local .env cannot leak into tests."""
    with patch.object(Config, "OLLAMA_BASE_URL", "http://localhost:11434"), \
            patch.object(Config, "LLM_BACKEND", "ollama"):
        yield
