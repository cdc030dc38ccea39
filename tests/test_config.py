"""Tests for configuration management."""

import os

import pytest
import yaml
from pydantic import ValidationError

from ai_orchestrator.config.settings import Settings, load_config, _merge_dicts
from ai_orchestrator.utils import secrets

ENV_VARS = [
    "GOOGLE_API_KEY",
    "OPENAI_API_KEY",
    "XAI_API_KEY",
    "GEMINI_API_BASE",
    "GEMINI_MODEL",
    "OPENAI_API_BASE",
    "OPENAI_MODEL",
    "XAI_API_BASE",
    "XAI_MODEL",
    "LOG_LEVEL",
    "LOG_FILE",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Empty provider environment, run from an empty directory."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(secrets, "env_paths", lambda: [tmp_path / ".env"])
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestSettings:
    """Tests for Settings defaults."""

    def test_provider_defaults(self):
        settings = Settings()

        assert settings.gemini.model == "gemini-1.5-pro"
        assert settings.openai.model == "gpt-4-turbo-preview"
        assert settings.grok.model == "grok-beta"
        assert settings.openai.max_tokens == 2000
        assert settings.grok.api_base == "https://api.x.ai/v1"
        assert settings.gemini.api_key is None

    def test_headings(self):
        settings = Settings()

        assert settings.gemini.heading == "Gemini (Security & Docs)"
        assert settings.openai.heading == "GPT-4 (Code Quality)"
        assert settings.grok.heading == "Grok (Edge Cases)"

    def test_rejects_non_positive_limits(self):
        with pytest.raises(ValidationError):
            Settings.model_validate({"review": {"max_input_chars": 0}})
        with pytest.raises(ValidationError):
            Settings.model_validate({"openai": {"max_tokens": -1}})


class TestLoadConfig:
    """Tests for load_config."""

    def test_without_files_or_env(self, clean_env):
        settings = load_config()

        assert settings.openai.api_key is None
        assert settings.logging.level == "info"

    def test_reads_yaml_and_secrets(self, clean_env):
        config_path = clean_env / "ai_orchestrator.config.yaml"
        config_path.write_text(yaml.safe_dump({"openai": {"model": "gpt-4o"}, "review": {"max_input_chars": 500}}))
        (clean_env / "ai_orchestrator.config.secrets.yaml").write_text(
            yaml.safe_dump({"openai": {"api_key": "sk-file"}})
        )

        settings = load_config(str(config_path))

        assert settings.openai.model == "gpt-4o"
        assert settings.openai.api_key == "sk-file"
        assert settings.review.max_input_chars == 500

    def test_env_overrides_file(self, clean_env, monkeypatch):
        config_path = clean_env / "ai_orchestrator.config.yaml"
        config_path.write_text(yaml.safe_dump({"openai": {"api_key": "sk-file", "model": "gpt-4o"}}))
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("XAI_MODEL", "grok-2")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_config(str(config_path))

        assert settings.openai.api_key == "sk-env"
        assert settings.openai.model == "gpt-4o"
        assert settings.grok.model == "grok-2"
        assert settings.logging.level == "debug"

    def test_empty_env_key_counts_as_unset(self, clean_env, monkeypatch):
        monkeypatch.setenv("GOOGLE_API_KEY", "")

        assert load_config().gemini.api_key is None

    def test_prefixed_env_vars(self, clean_env, monkeypatch):
        monkeypatch.setenv("AI_ORCHESTRATOR_REVIEW__MAX_INPUT_CHARS", "1200")
        monkeypatch.setenv("AI_ORCHESTRATOR_GEMINI__MAX_TOKENS", "512")

        settings = load_config()

        assert settings.review.max_input_chars == 1200
        assert settings.gemini.max_tokens == 512

    def test_dotenv_file(self, clean_env):
        (clean_env / ".env").write_text("XAI_API_KEY=xai-from-dotenv\n")

        try:
            settings = load_config()
        finally:
            os.environ.pop("XAI_API_KEY", None)

        assert settings.grok.api_key == "xai-from-dotenv"

    def test_log_level_aliases(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warn")

        assert load_config().logging.level == "warn"

    def test_unknown_log_level_is_config_error(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            load_config()

    def test_use_env_false(self, clean_env, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        assert load_config(use_env=False).openai.api_key is None


class TestMergeDicts:
    """Tests for recursive config merging."""

    def test_nested_merge(self):
        target = {"a": 1, "b": {"c": 2, "d": 3}}

        _merge_dicts(target, {"b": {"c": 10}, "e": 5})

        assert target == {"a": 1, "b": {"c": 10, "d": 3}, "e": 5}


class TestSecrets:
    """Tests for secret helpers."""

    def test_get_api_key(self, clean_env, monkeypatch):
        monkeypatch.setenv("XAI_API_KEY", "xai-1")

        assert secrets.get_api_key("grok") == "xai-1"
        assert secrets.get_api_key("gemini") is None

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            secrets.get_api_key("claude")

    def test_env_template(self, tmp_path):
        path = tmp_path / ".env.example"

        secrets.generate_env_template(str(path))

        content = path.read_text()
        for name in ("GOOGLE_API_KEY", "OPENAI_API_KEY", "XAI_API_KEY"):
            assert f"{name}=" in content
