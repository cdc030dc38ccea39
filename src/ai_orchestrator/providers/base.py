"""
Base provider client for the AI Orchestrator server.

A provider client knows one upstream endpoint: how to build its request,
which header carries the credential, and where the reply text lives in
its response envelope. ``ProviderClient.call`` never raises for provider
failures; it returns a ``ProviderCallResult`` carrying an ``ErrorKind``.
"""

import asyncio
import json
from typing import Any, Dict, Optional, Tuple

import aiohttp
from pydantic import BaseModel

from ai_orchestrator.config.settings import ProviderSettings
from ai_orchestrator.errors import ErrorKind, InvalidResponseError, ProviderUnavailableError
from ai_orchestrator.prompts import compose_prompt
from ai_orchestrator.utils.logging import get_logger

logger = get_logger(__name__)

# Longest slice of an error body echoed back in messages
ERROR_BODY_PREVIEW = 300

_MISSING = object()


class ProviderCallResult(BaseModel):
    """Outcome of one provider call: reply text or an error kind, never both."""

    provider_id: str
    text: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def success(cls, provider_id: str, text: str) -> "ProviderCallResult":
        return cls(provider_id=provider_id, text=text)

    @classmethod
    def failure(cls, provider_id: str, kind: ErrorKind, message: str) -> "ProviderCallResult":
        return cls(provider_id=provider_id, error_kind=kind, error_message=message)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def render(self) -> str:
        """Reply text, or a one-line error description."""
        if self.ok:
            return self.text or ""
        return f"Error [{self.error_kind}]: {self.error_message}"


def dig(data: Any, *path: Any) -> Any:
    """
    Follow a path of dict keys and list indexes, returning None on any miss.

    Args:
        data: Decoded JSON value.
        *path: Keys (str) and indexes (int) to follow.

    Returns:
        The value at the end of the path, or None.
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step, _MISSING)
            if current is _MISSING:
                return None
    return current


def _preview(text: str) -> str:
    text = text.strip()
    if len(text) > ERROR_BODY_PREVIEW:
        return text[:ERROR_BODY_PREVIEW] + "..."
    return text


class ProviderClient:
    """
    Base class for provider clients.

    Subclasses set ``provider_id`` and implement ``build_request`` and
    ``extract_text``.
    """

    provider_id: str = ""

    def __init__(self, settings: ProviderSettings, max_input_chars: Optional[int] = None):
        """
        Initialize the provider client.

        Args:
            settings: Endpoint, credential and generation settings.
            max_input_chars: Optional bound on the code context sent upstream.
        """
        self.settings = settings
        self.max_input_chars = max_input_chars
        self.logger = get_logger(f"{__name__}.{self.provider_id}")

    @property
    def heading(self) -> str:
        return self.settings.heading

    @property
    def review_instruction(self) -> str:
        return self.settings.review_instruction

    @property
    def has_credential(self) -> bool:
        return bool(self.settings.api_key)

    def build_request(self, prompt: str) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        """
        Build the outbound request for a fully composed prompt.

        Returns:
            Tuple of (url, headers, JSON payload).
        """
        raise NotImplementedError("Subclasses must implement build_request()")

    def extract_text(self, body: Any) -> str:
        """
        Pull the reply text out of the provider's response envelope.

        Raises:
            InvalidResponseError: If the envelope does not have the expected shape.
        """
        raise NotImplementedError("Subclasses must implement extract_text()")

    async def call(self, prompt: str, code: Optional[str] = None) -> ProviderCallResult:
        """
        Send one prompt, with optional code context, to the provider.

        Args:
            prompt: Instruction text.
            code: Optional code context appended after a blank line.

        Returns:
            A ProviderCallResult with text, or with an error kind.
        """
        if not self.has_credential:
            message = f"{self.settings.api_key_env} not set"
            self.logger.warning(f"Skipping {self.provider_id} call: {message}")
            return ProviderCallResult.failure(self.provider_id, ErrorKind.MISSING_CREDENTIAL, message)

        full_prompt = compose_prompt(prompt, code, self.max_input_chars)
        url, headers, payload = self.build_request(full_prompt)

        self.logger.debug(
            "Calling provider",
            data={
                "provider": self.provider_id,
                "model": self.settings.model,
                "prompt_chars": len(full_prompt),
            },
        )

        try:
            body = await self._send(url, headers, payload)
            text = self.extract_text(body)
        except (ProviderUnavailableError, InvalidResponseError) as e:
            self.logger.warning(f"{self.provider_id} call failed [{e.kind}]: {e}")
            return ProviderCallResult.failure(self.provider_id, e.kind, str(e))

        return ProviderCallResult.success(self.provider_id, text)

    async def _send(self, url: str, headers: Dict[str, str], payload: Dict[str, Any]) -> Any:
        """
        POST the payload and decode the JSON reply.

        Raises:
            ProviderUnavailableError: On transport failure or a non-success status.
            InvalidResponseError: If a success reply is not valid JSON.
        """
        timeout = aiohttp.ClientTimeout(total=self.settings.timeout_seconds) if self.settings.timeout_seconds else None
        session_kwargs = {"timeout": timeout} if timeout else {}

        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.post(url, headers=headers, json=payload) as response:
                    raw = await response.read()
                    status = response.status
        except asyncio.TimeoutError:
            raise ProviderUnavailableError(f"{self.provider_id} request timed out") from None
        except aiohttp.ClientError as e:
            raise ProviderUnavailableError(f"{self.provider_id} request failed: {e}") from e

        if not 200 <= status < 300:
            text = raw.decode("utf-8", errors="replace")
            raise ProviderUnavailableError(f"{self.provider_id} API error: {status} - {_preview(text)}")

        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError:
            # UnicodeDecodeError is a ValueError too
            text = raw.decode("utf-8", errors="replace")
            raise InvalidResponseError(
                f"{self.provider_id} returned a body that is not JSON: {_preview(text)}"
            ) from None
