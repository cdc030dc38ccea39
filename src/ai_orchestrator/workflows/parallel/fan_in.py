"""
Fan-in component for parallel provider calls.

This module provides the FanIn class that assembles per-provider results
into a single sectioned report.
"""

from typing import List, Sequence

from pydantic import BaseModel

from ai_orchestrator.providers.base import ProviderCallResult, ProviderClient


class ReportSection(BaseModel):
    """One provider's part of a composite report."""

    heading: str
    result: ProviderCallResult

    model_config = {"frozen": True}

    def render(self) -> str:
        return f"## {self.heading}\n{self.result.render()}"


class CompositeReport(BaseModel):
    """Per-provider sections in provider registration order."""

    sections: List[ReportSection]

    @property
    def results(self) -> List[ProviderCallResult]:
        return [section.result for section in self.sections]

    @property
    def failed(self) -> List[ProviderCallResult]:
        return [result for result in self.results if not result.ok]

    def render(self) -> str:
        """Sections as markdown headings separated by blank lines."""
        return "\n\n".join(section.render() for section in self.sections)


class FanIn:
    """Aggregate results from a fan-out into a composite report."""

    def compose(
        self,
        providers: Sequence[ProviderClient],
        results: Sequence[ProviderCallResult],
    ) -> CompositeReport:
        """
        Pair each provider with its result.

        Args:
            providers: Providers in registration order.
            results: Results positionally matching ``providers``.

        Returns:
            The composite report.

        Raises:
            ValueError: If the two sequences differ in length.
        """
        if len(providers) != len(results):
            raise ValueError(
                f"Expected {len(providers)} results, got {len(results)}"
            )

        return CompositeReport(
            sections=[
                ReportSection(heading=provider.heading, result=result)
                for provider, result in zip(providers, results)
            ]
        )
