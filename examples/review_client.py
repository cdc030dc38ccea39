"""
Run a multi-provider review of a file through the AI Orchestrator MCP server.

The server is started as a subprocess over stdio, the same way an MCP-capable
agent would launch it.

Usage:
    python examples/review_client.py path/to/file.py [focus]
"""

import asyncio
import os
import sys

from mcp import ClientSession
from mcp.client.stdio import StdioServerParameters, get_default_environment, stdio_client

PASSTHROUGH_ENV = ("GOOGLE_API_KEY", "OPENAI_API_KEY", "XAI_API_KEY", "LOG_LEVEL")


async def main(path: str, focus: str = "all") -> None:
    with open(path, "r") as f:
        code = f.read()

    env = {**get_default_environment(), **{k: os.environ[k] for k in PASSTHROUGH_ENV if k in os.environ}}
    server = StdioServerParameters(command=sys.executable, args=["-m", "ai_orchestrator"], env=env)

    async with stdio_client(server) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            tools = await session.list_tools()
            print(f"Server tools: {', '.join(tool.name for tool in tools.tools)}", file=sys.stderr)

            result = await session.call_tool("multi_ai_review", {"code": code, "focus": focus})
            for content in result.content:
                if content.type == "text":
                    print(content.text)

    if result.isError:
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    asyncio.run(main(*sys.argv[1:3]))
