"""
Configuration management for the AI Orchestrator server.
"""

from .settings import (
    Settings,
    ProviderSettings,
    GeminiSettings,
    OpenAISettings,
    GrokSettings,
    ReviewSettings,
    ServerSettings,
    LoggingSettings,
    load_config,
)

__all__ = [
    "Settings",
    "ProviderSettings",
    "GeminiSettings",
    "OpenAISettings",
    "GrokSettings",
    "ReviewSettings",
    "ServerSettings",
    "LoggingSettings",
    "load_config",
]
