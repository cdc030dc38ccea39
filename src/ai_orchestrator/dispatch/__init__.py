"""
Tool invocation dispatch for the AI Orchestrator server.
"""

from .dispatcher import Dispatcher

__all__ = ["Dispatcher"]
