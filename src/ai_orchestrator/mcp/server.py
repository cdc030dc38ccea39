"""
MCP server binding for the AI Orchestrator dispatcher.
"""

from typing import Any, Dict, List, Optional

from mcp.server.lowlevel.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from ai_orchestrator.dispatch.dispatcher import Dispatcher
from ai_orchestrator.tools.registry import ToolRegistry
from ai_orchestrator.tools.types import ToolInvocationRequest, ToolResult
from ai_orchestrator.utils.logging import get_logger

logger = get_logger(__name__)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Convert a ToolResult into the MCP wire result."""
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


class OrchestratorServer(Server):
    """
    An MCP server exposing the tool registry through the dispatcher.

    Each ``tools/call`` request is handled on its own; nothing is kept
    between requests.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        registry: ToolRegistry,
        name: str = "ai-orchestrator",
        version: Optional[str] = None,
    ):
        """
        Initialize the server.

        Args:
            dispatcher: Dispatcher that runs tool invocations.
            registry: Registry listed to clients.
            name: Server name reported during initialization.
            version: Server version reported during initialization.
        """
        super().__init__(name, version=version)
        self.dispatcher = dispatcher
        self.registry = registry

        # Register handlers
        self.list_tools()(self._list_tools)
        # Arguments are checked by the registry, not by the transport
        self.call_tool(validate_input=False)(self._call_tool)

    async def _list_tools(self) -> List[Tool]:
        """List every registered tool."""
        return [definition.to_mcp_tool() for definition in self.registry.list()]

    async def _call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """Run one tool invocation through the dispatcher."""
        request = ToolInvocationRequest(tool_name=name, arguments=arguments or {})
        result = await self.dispatcher.invoke(request)
        return to_call_tool_result(result)

    async def run_stdio_async(self) -> None:
        """Run the server using stdio transport until the channel closes."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"{self.name}: serving {len(self.registry)} tools over stdio")
            await self.run(
                read_stream=read_stream,
                write_stream=write_stream,
                initialization_options=self.create_initialization_options(),
            )
        logger.info(f"{self.name}: stdio channel closed")
