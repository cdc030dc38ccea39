"""
Provider clients for the AI Orchestrator server.
"""

from typing import List

from ai_orchestrator.config.settings import Settings
from .base import ProviderClient, ProviderCallResult, dig
from .gemini import GeminiClient
from .openai import OpenAIClient, GrokClient

# Registration order; fixes section order in multi-provider reviews
PROVIDER_CLASSES = {
    "gemini": GeminiClient,
    "openai": OpenAIClient,
    "grok": GrokClient,
}


def create_providers(settings: Settings) -> List[ProviderClient]:
    """
    Create one client per configured provider, in registration order.

    Args:
        settings: Root settings holding each provider's section.

    Returns:
        List of provider clients.
    """
    max_input_chars = settings.review.max_input_chars
    return [
        provider_class(getattr(settings, provider_id), max_input_chars=max_input_chars)
        for provider_id, provider_class in PROVIDER_CLASSES.items()
    ]


__all__ = [
    "ProviderClient",
    "ProviderCallResult",
    "GeminiClient",
    "OpenAIClient",
    "GrokClient",
    "PROVIDER_CLASSES",
    "create_providers",
    "dig",
]
