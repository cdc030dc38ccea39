"""
Shared fixtures for the AI Orchestrator tests.

Provider fakes replace only the HTTP layer (``_send``), so credential
checks, prompt composition and envelope parsing still run for real.
"""

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from ai_orchestrator.config.settings import (
    GeminiSettings,
    GrokSettings,
    OpenAISettings,
    ProviderSettings,
)
from ai_orchestrator.providers.openai import OpenAIClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


def chat_envelope(text: str) -> Dict[str, Any]:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]}


class FakeProvider(OpenAIClient):
    """Provider whose outbound request is answered locally."""

    def __init__(
        self,
        provider_id: str,
        settings: ProviderSettings,
        reply: Optional[str] = None,
        delay: float = 0.0,
        error: Optional[BaseException] = None,
        body: Optional[Any] = None,
    ):
        self.provider_id = provider_id
        super().__init__(settings)
        self.reply = reply if reply is not None else f"{provider_id} says ok"
        self.delay = delay
        self.error = error
        self.body = body
        self.sent: List[Dict[str, Any]] = []

    async def _send(self, url: str, headers: Dict[str, str], payload: Dict[str, Any]) -> Any:
        self.sent.append(payload)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return self.body
        return chat_envelope(self.reply)

    @property
    def calls(self) -> int:
        return len(self.sent)

    def last_user_message(self) -> str:
        return self.sent[-1]["messages"][-1]["content"]


def make_fake_providers(
    keys: Optional[Dict[str, Optional[str]]] = None,
    delays: Optional[Dict[str, float]] = None,
) -> List[FakeProvider]:
    """Fake gemini, openai and grok providers, in registration order."""
    keys = keys if keys is not None else {}
    delays = delays or {}
    settings_classes = {
        "gemini": GeminiSettings,
        "openai": OpenAISettings,
        "grok": GrokSettings,
    }
    return [
        FakeProvider(
            provider_id,
            settings_class(api_key=keys.get(provider_id, f"{provider_id}-key")),
            delay=delays.get(provider_id, 0.0),
        )
        for provider_id, settings_class in settings_classes.items()
    ]


@pytest.fixture
def fake_providers() -> List[FakeProvider]:
    return make_fake_providers()
