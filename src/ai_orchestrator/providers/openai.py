"""
OpenAI-compatible chat completion provider clients.
"""

from typing import Any, Dict, List, Tuple

from ai_orchestrator.errors import InvalidResponseError
from ai_orchestrator.providers.base import ProviderClient, dig


class OpenAIClient(ProviderClient):
    """Client for an OpenAI-style ``/chat/completions`` endpoint."""

    provider_id = "openai"

    def build_request(self, prompt: str) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }

        messages: List[Dict[str, str]] = []
        if self.settings.system_prompt:
            messages.append({"role": "system", "content": self.settings.system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.settings.model,
            "max_tokens": self.settings.max_tokens,
            "messages": messages,
        }
        return f"{self.settings.api_base.rstrip('/')}/chat/completions", headers, payload

    def extract_text(self, body: Any) -> str:
        content = dig(body, "choices", 0, "message", "content")
        if not isinstance(content, str):
            raise InvalidResponseError(
                f"Unexpected {self.provider_id} API response format: missing choices[0].message.content"
            )
        return content


class GrokClient(OpenAIClient):
    """Client for xAI Grok, which speaks the OpenAI chat completion format."""

    provider_id = "grok"
