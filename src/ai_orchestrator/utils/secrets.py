"""
Secret management utilities for the AI Orchestrator server.

This module provides functions for accessing provider API keys,
leveraging environment variables and .env files for local development.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Environment variable holding each provider's API key
API_KEY_ENV = {
    "gemini": "GOOGLE_API_KEY",
    "openai": "OPENAI_API_KEY",
    "grok": "XAI_API_KEY",
}


def env_paths() -> List[Path]:
    """Paths to check for .env files, in order of precedence."""
    return [
        Path.cwd() / ".env",                          # Project root .env file
        Path.cwd() / ".secrets.env",                  # Alternative secrets file
        Path.home() / ".ai_orchestrator" / ".env",    # User-level config
    ]


def load_env_files() -> Optional[Path]:
    """
    Load environment variables from the first .env file found.

    Variables already present in the environment are not overridden.

    Returns:
        The path that was loaded, or None if no file exists.
    """
    for env_path in env_paths():
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
            return env_path
    return None


def get_secret(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get a secret from environment variables with fallback.

    Empty values count as unset.

    Args:
        key: The environment variable name containing the secret
        default: Default value if the secret is not found

    Returns:
        The secret value or default if not found
    """
    return os.environ.get(key) or default


def get_api_key(provider: str) -> Optional[str]:
    """
    Get API key for a specific provider.

    Args:
        provider: Provider id ("gemini", "openai" or "grok")

    Returns:
        The API key for the specified provider or None if not found

    Raises:
        ValueError: If the provider is not supported
    """
    provider = provider.lower()
    if provider not in API_KEY_ENV:
        raise ValueError(f"Unknown provider: {provider}")
    return get_secret(API_KEY_ENV[provider])


def generate_env_template(output_path: str = ".env.example") -> None:
    """
    Generate a template .env file with placeholders for secrets.

    Args:
        output_path: Path where the template file should be created
    """
    template = """# AI Orchestrator Secrets
# Save this file as .env in the project root or ~/.ai_orchestrator/.env

# Google Gemini
GOOGLE_API_KEY=...
GEMINI_MODEL=gemini-1.5-pro

# OpenAI
OPENAI_API_KEY=sk-...
OPENAI_API_BASE=https://api.openai.com/v1
OPENAI_MODEL=gpt-4-turbo-preview

# xAI Grok
XAI_API_KEY=xai-...
XAI_API_BASE=https://api.x.ai/v1
XAI_MODEL=grok-beta

# Logging
LOG_LEVEL=info
"""
    with open(output_path, "w") as f:
        f.write(template)
