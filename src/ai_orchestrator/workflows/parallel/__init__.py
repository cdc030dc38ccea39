"""
Parallel processing workflows for the AI Orchestrator server.

This module provides components for parallel processing, including:
- FanOut: Sends prompts to several providers at once
- FanIn: Assembles per-provider results into a composite report
- MultiProviderReview: Coordinates a code review with fan-out and fan-in
"""

from ai_orchestrator.workflows.parallel.fan_out import FanOut, ProviderCall
from ai_orchestrator.workflows.parallel.fan_in import FanIn, CompositeReport, ReportSection
from ai_orchestrator.workflows.parallel.review import MultiProviderReview

__all__ = ["FanOut", "ProviderCall", "FanIn", "CompositeReport", "ReportSection", "MultiProviderReview"]
