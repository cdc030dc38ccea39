"""
Workflow components for the AI Orchestrator server.
"""

from ai_orchestrator.workflows.parallel import (
    FanOut, ProviderCall,
    FanIn, CompositeReport, ReportSection,
    MultiProviderReview,
)

__all__ = [
    "FanOut",
    "ProviderCall",
    "FanIn",
    "CompositeReport",
    "ReportSection",
    "MultiProviderReview",
]
