"""Tests for Config validation and derived URLs."""

import importlib.util
import os
from pathlib import Path
from unittest.mock import patch

from config import Config


class TestConfig:
    def test_derived_urls(self):
        with patch.object(Config, "OLLAMA_BASE_URL", "http://gpu-box:11434/"):
            assert Config.generate_url() == "http://gpu-box:11434/api/generate"
            assert Config.tags_url() == "http://gpu-box:11434/api/tags"

    def test_default_timeouts(self):
        assert Config.GENERATE_TIMEOUT_S == 30
        assert Config.LIST_TIMEOUT_S == 5

    def test_timeouts_ignore_environment(self):
        # Load a private copy of the module so the shared Config is untouched.
        path = Path(__file__).resolve().parents[2] / "config.py"
        spec = importlib.util.spec_from_file_location("config_env_copy", path)
        module = importlib.util.module_from_spec(spec)

        with patch.dict(os.environ, {"GENERATE_TIMEOUT_S": "1", "LIST_TIMEOUT_S": "0.5"}):
            spec.loader.exec_module(module)

        assert module.Config.GENERATE_TIMEOUT_S == 30
        assert module.Config.LIST_TIMEOUT_S == 5

    def test_valid_defaults(self):
        assert Config.problems() == []
        assert Config.validate() is True

    def test_rejects_non_http_url(self):
        with patch.object(Config, "OLLAMA_BASE_URL", "ftp://bad"):
            assert Config.validate() is False

    def test_rejects_unknown_backend(self):
        with patch.object(Config, "LLM_BACKEND", "openai"):
            problems = Config.problems()
        assert any("LLM_BACKEND" in p for p in problems)
