"""
AI Orchestrator - an MCP server that fans code-review prompts out to several LLM providers.
"""

__version__ = "0.1.0"

# Configuration
from ai_orchestrator.config import load_config, Settings

# Errors
from ai_orchestrator.errors import ErrorKind

# Providers
from ai_orchestrator.providers import ProviderClient, ProviderCallResult, create_providers

# Tools and dispatch
from ai_orchestrator.tools import ToolDefinition, ToolInvocationRequest, ToolResult, ToolRegistry, build_registry
from ai_orchestrator.dispatch import Dispatcher

# Workflows
from ai_orchestrator.workflows import MultiProviderReview, CompositeReport

__all__ = [
    "load_config",
    "Settings",
    "ErrorKind",
    "ProviderClient",
    "ProviderCallResult",
    "create_providers",
    "ToolDefinition",
    "ToolInvocationRequest",
    "ToolResult",
    "ToolRegistry",
    "build_registry",
    "Dispatcher",
    "MultiProviderReview",
    "CompositeReport",
]
