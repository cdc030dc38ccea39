"""
Multi-provider code review workflow.

This module provides the MultiProviderReview class that sends one piece of
code to every provider with a role-specific prompt and collects the replies
into a composite report.
"""

from typing import List, Sequence, Union

from ai_orchestrator.prompts import DEFAULT_FOCUS, Focus, build_review_prompt
from ai_orchestrator.providers.base import ProviderClient
from ai_orchestrator.utils.logging import get_logger
from ai_orchestrator.workflows.parallel.fan_in import CompositeReport, FanIn
from ai_orchestrator.workflows.parallel.fan_out import FanOut, ProviderCall

logger = get_logger(__name__)


class MultiProviderReview:
    """
    Parallel review across all registered providers.

    Each provider gets the focus template followed by its own review
    instruction, e.g. Gemini is asked about documentation and security while
    GPT-4 is asked about code quality.
    """

    def __init__(self, providers: Sequence[ProviderClient]):
        """
        Initialize the review workflow.

        Args:
            providers: Providers in registration order.
        """
        if not providers:
            raise ValueError("At least one provider must be provided")

        self.providers: List[ProviderClient] = list(providers)
        self.fan_out = FanOut()
        self.fan_in = FanIn()

    def build_calls(self, code: str, focus: Union[Focus, str] = DEFAULT_FOCUS) -> List[ProviderCall]:
        """Build one call per provider for the given focus."""
        focus = Focus(focus)
        return [
            ProviderCall(
                provider=provider,
                prompt=build_review_prompt(focus, provider.review_instruction),
                code=code,
            )
            for provider in self.providers
        ]

    async def review(self, code: str, focus: Union[Focus, str] = DEFAULT_FOCUS) -> CompositeReport:
        """
        Run the review.

        Args:
            code: Code to review.
            focus: Review focus.

        Returns:
            Composite report with one section per provider.
        """
        calls = self.build_calls(code, focus)
        results = await self.fan_out.execute(calls)
        report = self.fan_in.compose(self.providers, results)

        logger.info(
            "Multi-provider review finished",
            data={
                "focus": Focus(focus).value,
                "providers": len(report.sections),
                "failed": [result.provider_id for result in report.failed],
            },
        )
        return report
