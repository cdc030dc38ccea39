"""
The static tool table: three single-provider query tools and one
multi-provider review tool.
"""

from typing import Any, Dict, Iterable, List, Tuple

from ai_orchestrator.prompts import DEFAULT_FOCUS, Focus
from ai_orchestrator.providers.base import ProviderClient
from ai_orchestrator.tools.registry import ToolHandler, ToolRegistry
from ai_orchestrator.tools.types import ParameterSpec, ToolDefinition, ToolResult
from ai_orchestrator.workflows.parallel.review import MultiProviderReview

MULTI_REVIEW_TOOL = "multi_ai_review"

# tool name -> (provider id, model label, description)
ASK_TOOLS = {
    "ask_gemini": (
        "gemini",
        "Gemini",
        "Ask Google Gemini for code review or analysis. Good for security and documentation review.",
    ),
    "ask_gpt4": (
        "openai",
        "GPT-4",
        "Ask GPT-4/Codex for code review. Good for code quality and best practices.",
    ),
    "ask_grok": (
        "grok",
        "Grok",
        "Ask Grok for creative analysis. Good for edge cases and unconventional insights.",
    ),
}


def ask_tool_definition(name: str, label: str, description: str) -> ToolDefinition:
    return ToolDefinition(
        name=name,
        description=description,
        parameters={
            "prompt": ParameterSpec(
                type="string",
                description=f"The prompt to send to {label}",
                required=True,
            ),
            "code": ParameterSpec(
                type="string",
                description="Optional code context to include",
            ),
        },
    )


MULTI_REVIEW_DEFINITION = ToolDefinition(
    name=MULTI_REVIEW_TOOL,
    description="Get code review from all AI models in parallel",
    parameters={
        "code": ParameterSpec(
            type="string",
            description="Code to review",
            required=True,
        ),
        "focus": ParameterSpec(
            type="string",
            description="What to focus on: architecture, security, quality, or all",
            enum=[focus.value for focus in Focus],
            default=DEFAULT_FOCUS.value,
        ),
    },
)


def _ask_handler(provider: ProviderClient) -> ToolHandler:
    async def handler(arguments: Dict[str, Any]) -> ToolResult:
        result = await provider.call(arguments["prompt"], arguments.get("code"))
        return ToolResult.from_provider_result(result)

    handler.__name__ = f"ask_{provider.provider_id}"
    return handler


def _review_handler(review: MultiProviderReview) -> ToolHandler:
    async def handler(arguments: Dict[str, Any]) -> ToolResult:
        report = await review.review(arguments["code"], arguments.get("focus", DEFAULT_FOCUS))
        return ToolResult(text=report.render())

    handler.__name__ = MULTI_REVIEW_TOOL
    return handler


def tool_entries(providers: Iterable[ProviderClient]) -> List[Tuple[ToolDefinition, ToolHandler]]:
    """
    Pair every tool definition with its handler.

    Args:
        providers: Provider clients in registration order.

    Returns:
        (definition, handler) pairs in listing order.

    Raises:
        ValueError: If a provider needed by a query tool is missing.
    """
    providers = list(providers)
    by_id = {provider.provider_id: provider for provider in providers}

    entries: List[Tuple[ToolDefinition, ToolHandler]] = []
    for name, (provider_id, label, description) in ASK_TOOLS.items():
        if provider_id not in by_id:
            raise ValueError(f"No provider registered for tool '{name}': {provider_id}")
        entries.append((ask_tool_definition(name, label, description), _ask_handler(by_id[provider_id])))

    entries.append((MULTI_REVIEW_DEFINITION, _review_handler(MultiProviderReview(providers))))
    return entries


def build_registry(providers: Iterable[ProviderClient]) -> ToolRegistry:
    """Build the tool registry for the given providers."""
    return ToolRegistry(tool_entries(providers))
