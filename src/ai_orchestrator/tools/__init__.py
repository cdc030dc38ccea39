"""
Tool registry and tool table for the AI Orchestrator server.
"""

from .types import ParameterSpec, ToolDefinition, ToolInvocationRequest, ToolResult
from .registry import RegisteredTool, ToolHandler, ToolRegistry
from .catalog import ASK_TOOLS, MULTI_REVIEW_TOOL, build_registry

__all__ = [
    "ParameterSpec",
    "ToolDefinition",
    "ToolInvocationRequest",
    "ToolResult",
    "RegisteredTool",
    "ToolHandler",
    "ToolRegistry",
    "ASK_TOOLS",
    "MULTI_REVIEW_TOOL",
    "build_registry",
]
