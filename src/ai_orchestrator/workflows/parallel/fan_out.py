"""
Fan-out component for parallel provider calls.

This module provides the FanOut class that sends prompts to several
providers at once and waits for every call to settle.
"""

import asyncio
from typing import List, NamedTuple, Optional

from ai_orchestrator.errors import ErrorKind
from ai_orchestrator.providers.base import ProviderCallResult, ProviderClient
from ai_orchestrator.utils.logging import get_logger

logger = get_logger(__name__)


class ProviderCall(NamedTuple):
    """One branch of a fan-out: which provider gets which prompt."""

    provider: ProviderClient
    prompt: str
    code: Optional[str] = None


class FanOut:
    """
    Distribute calls to multiple providers in parallel.

    Join-all: ``execute`` returns only once every branch has succeeded or
    failed. Results come back in the order the calls were given, whatever
    order they completed in.
    """

    async def execute(self, calls: List[ProviderCall]) -> List[ProviderCallResult]:
        """
        Run all calls concurrently.

        Args:
            calls: Calls to issue, in the order results should be reported.

        Returns:
            One result per call, positionally matching ``calls``.
        """
        if not calls:
            return []

        logger.info(f"Running {len(calls)} fan-out provider calls")
        results = await asyncio.gather(
            *(call.provider.call(call.prompt, call.code) for call in calls),
            return_exceptions=True,
        )

        ordered: List[ProviderCallResult] = []
        for call, result in zip(calls, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                logger.error(f"Error in fan-out call to {call.provider.provider_id}: {result!r}")
                ordered.append(
                    ProviderCallResult.failure(
                        call.provider.provider_id, ErrorKind.HANDLER_FAILURE, str(result) or type(result).__name__
                    )
                )
            else:
                ordered.append(result)

        return ordered
