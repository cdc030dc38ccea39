"""
Settings models for the AI Orchestrator server.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ai_orchestrator.utils.logging import parse_level
from ai_orchestrator.utils.secrets import API_KEY_ENV, get_api_key, load_env_files

ENV_PREFIX = "AI_ORCHESTRATOR_"
DEFAULT_CONFIG_FILE = "ai_orchestrator.config.yaml"


class ProviderSettings(BaseModel):
    """Base settings for an LLM provider."""

    api_key: Optional[str] = None
    api_key_env: str
    api_base: str
    model: str
    max_tokens: int = 2000
    system_prompt: Optional[str] = None
    timeout_seconds: Optional[float] = None

    # Presentation in the multi-provider review
    display_name: str
    review_role: str
    review_instruction: str

    @field_validator("max_tokens")
    @classmethod
    def _positive_max_tokens(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max_tokens must be positive")
        return value

    @property
    def heading(self) -> str:
        """Section heading used in the composite review."""
        return f"{self.display_name} ({self.review_role})"


class GeminiSettings(ProviderSettings):
    """Settings for Google Gemini."""

    api_key_env: str = API_KEY_ENV["gemini"]
    api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-1.5-pro"
    display_name: str = "Gemini"
    review_role: str = "Security & Docs"
    review_instruction: str = "Focus on documentation and security."


class OpenAISettings(ProviderSettings):
    """Settings for OpenAI."""

    api_key_env: str = API_KEY_ENV["openai"]
    api_base: str = "https://api.openai.com/v1"
    model: str = "gpt-4-turbo-preview"
    system_prompt: Optional[str] = "You are an expert code reviewer."
    display_name: str = "GPT-4"
    review_role: str = "Code Quality"
    review_instruction: str = "Focus on code quality and best practices."


class GrokSettings(ProviderSettings):
    """Settings for xAI Grok."""

    api_key_env: str = API_KEY_ENV["grok"]
    api_base: str = "https://api.x.ai/v1"
    model: str = "grok-beta"
    system_prompt: Optional[str] = "You are Grok. Think outside the box."
    display_name: str = "Grok"
    review_role: str = "Edge Cases"
    review_instruction: str = "Find edge cases and unconventional issues."


class ReviewSettings(BaseModel):
    """Settings for prompt construction."""

    max_input_chars: Optional[int] = None

    @field_validator("max_input_chars")
    @classmethod
    def _positive_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("max_input_chars must be positive")
        return value


class ServerSettings(BaseModel):
    """Settings for the MCP server identity."""

    name: str = "ai-orchestrator"
    version: Optional[str] = None


class LoggingSettings(BaseModel):
    """Settings for logging configuration."""

    level: str = "info"
    file_path: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        parse_level(value)
        return value


class Settings(BaseModel):
    """Root settings object for the AI Orchestrator server."""

    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    grok: GrokSettings = Field(default_factory=GrokSettings)
    review: ReviewSettings = Field(default_factory=ReviewSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "extra": "ignore",
    }


def load_config(config_path: Optional[str] = None, use_env: bool = True) -> Settings:
    """
    Load and validate the configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.
            If None, look for 'ai_orchestrator.config.yaml' in the current directory.
        use_env: Whether .env files and environment variables are applied.

    Returns:
        Settings: Validated configuration object.
    """
    if config_path is None:
        config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)

    config_data: Dict[str, Any] = {}

    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}

    # Load secrets if they exist
    secrets_path = Path(config_path).with_suffix(".secrets.yaml")
    if secrets_path.exists():
        with open(secrets_path, "r") as f:
            secrets_data = yaml.safe_load(f) or {}

        _merge_dicts(config_data, secrets_data)

    # Environment variables override file settings
    if use_env:
        load_env_files()
        env_config = _load_from_env()
        if env_config:
            _merge_dicts(config_data, env_config)

    return Settings.model_validate(config_data)


def _load_from_env() -> Dict[str, Any]:
    """
    Load configuration from environment variables.

    Returns:
        Dict with configuration loaded from environment variables.
    """
    config: Dict[str, Any] = {}

    for provider in API_KEY_ENV:
        _set_nested_dict(config, [provider, "api_key"], get_api_key(provider))

    _set_nested_dict(config, ["gemini", "api_base"], os.environ.get("GEMINI_API_BASE"))
    _set_nested_dict(config, ["gemini", "model"], os.environ.get("GEMINI_MODEL"))

    _set_nested_dict(config, ["openai", "api_base"], os.environ.get("OPENAI_API_BASE"))
    _set_nested_dict(config, ["openai", "model"], os.environ.get("OPENAI_MODEL"))

    _set_nested_dict(config, ["grok", "api_base"], os.environ.get("XAI_API_BASE"))
    _set_nested_dict(config, ["grok", "model"], os.environ.get("XAI_MODEL"))

    _set_nested_dict(config, ["logging", "level"], os.environ.get("LOG_LEVEL"))
    _set_nested_dict(config, ["logging", "file_path"], os.environ.get("LOG_FILE"))

    # AI_ORCHESTRATOR_SECTION__KEY sets section.key
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            path = [part for part in key[len(ENV_PREFIX):].lower().split("__") if part]
            if path:
                _set_nested_dict(config, path, value)

    return config


def _set_nested_dict(d: Dict[str, Any], path: List[str], value: Any) -> None:
    """
    Set a value in a nested dictionary based on a path.

    Args:
        d: Dictionary to set value in.
        path: List of keys defining the path.
        value: Value to set.
    """
    if value is None:
        return

    if len(path) == 1:
        d[path[0]] = value
        return

    if not isinstance(d.get(path[0]), dict):
        d[path[0]] = {}

    _set_nested_dict(d[path[0]], path[1:], value)


def _merge_dicts(target: Dict, source: Dict) -> None:
    """
    Recursively merge source dictionary into target dictionary.
    Values in source will override values in target.

    Args:
        target: Target dictionary to merge into.
        source: Source dictionary with values to merge.
    """
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _merge_dicts(target[key], value)
        else:
            target[key] = value
