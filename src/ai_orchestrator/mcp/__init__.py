"""
MCP connectivity for the AI Orchestrator server.

This module binds the dispatcher to the Model Context Protocol over stdio.
"""

from .server import OrchestratorServer, to_call_tool_result

__all__ = [
    "OrchestratorServer",
    "to_call_tool_result",
]
