"""
Dispatcher: routes tool invocations to their handlers.
"""

from ai_orchestrator.errors import ErrorKind, OrchestratorError
from ai_orchestrator.tools.registry import ToolRegistry
from ai_orchestrator.tools.types import ToolInvocationRequest, ToolResult
from ai_orchestrator.utils.logging import get_logger

logger = get_logger(__name__)


class Dispatcher:
    """
    Resolves a tool by name, validates its arguments and runs its handler.

    ``invoke`` always returns a ToolResult. Unknown tools and invalid
    arguments are rejected before any handler runs; unexpected handler
    exceptions are reported as ``HandlerFailure``.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    async def invoke(self, request: ToolInvocationRequest) -> ToolResult:
        """
        Invoke a tool.

        Args:
            request: Tool name and raw arguments.

        Returns:
            The tool's result, or an error result.
        """
        name = request.tool_name

        try:
            tool = self.registry.resolve(name)
            arguments = self.registry.validate(name, request.arguments)
        except OrchestratorError as e:
            logger.warning(f"Rejected call to '{name}' [{e.kind}]: {e}")
            return ToolResult.from_error(e)

        logger.info(
            "Dispatching tool call",
            data={"tool_name": name, "arguments": sorted(arguments)},
        )

        try:
            return await tool.handler(arguments)
        except Exception as e:
            logger.error(f"Tool '{name}' failed: {e}", exc_info=True)
            return ToolResult.failure(ErrorKind.HANDLER_FAILURE, str(e) or type(e).__name__)
