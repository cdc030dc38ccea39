"""
Google Gemini provider client.
"""

from typing import Any, Dict, Tuple

from ai_orchestrator.errors import InvalidResponseError
from ai_orchestrator.providers.base import ProviderClient, dig


class GeminiClient(ProviderClient):
    """Client for the Gemini ``generateContent`` endpoint."""

    provider_id = "gemini"

    def build_request(self, prompt: str) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        url = f"{self.settings.api_base.rstrip('/')}/models/{self.settings.model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.settings.api_key,
        }
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": self.settings.max_tokens},
        }
        if self.settings.system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": self.settings.system_prompt}]}
        return url, headers, payload

    def extract_text(self, body: Any) -> str:
        parts = dig(body, "candidates", 0, "content", "parts")
        if not isinstance(parts, list) or not parts:
            # Blocked prompts come back with feedback instead of candidates
            block_reason = dig(body, "promptFeedback", "blockReason")
            if block_reason:
                raise InvalidResponseError(f"gemini blocked the prompt: {block_reason}")
            raise InvalidResponseError("Unexpected Gemini API response format: no candidate parts")

        texts = [part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
        if not texts:
            raise InvalidResponseError("Unexpected Gemini API response format: no text parts")
        return "".join(texts)
