"""
MCP stdio transport.

Bridges the tool registry onto the ``mcp`` SDK's low-level server so the
tools can be launched as a subprocess by an MCP client.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent, Tool

from task_mcp import config
from task_mcp.db.config import Database
from task_mcp.db.init import init_db
from task_mcp.mcp.server import MCPServer, create_mcp_server
from task_mcp.utils.logger import configure_logging

logger = logging.getLogger(__name__)


def build_tool_list(mcp_server: MCPServer) -> List[Tool]:
    """Registry schemas as MCP ``Tool`` objects."""
    return [
        Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["parameters"],
        )
        for schema in mcp_server.get_tool_schemas().values()
    ]


def render_result(envelope: Dict[str, Any]) -> List[TextContent]:
    """Envelope as a single JSON text block."""
    return [TextContent(type="text", text=json.dumps(envelope, ensure_ascii=False))]


def build_call_result(envelope: Dict[str, Any]) -> CallToolResult:
    """Envelope as a tool result; failure envelopes are flagged with ``isError``."""
    return CallToolResult(content=render_result(envelope), isError=not envelope["success"])


def create_stdio_server(mcp_server: MCPServer) -> Server:
    server = Server(mcp_server.name)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return build_tool_list(mcp_server)

    async def call_tool(request: CallToolRequest) -> ServerResult:
        envelope = await mcp_server.invoke_tool(request.params.name, request.params.arguments or {})
        return ServerResult(build_call_result(envelope))

    # registered by hand so failure envelopes are returned with isError=True
    server.request_handlers[CallToolRequest] = call_tool

    return server


async def main() -> None:
    """Run the MCP server over stdin/stdout."""
    configure_logging()
    database = Database()
    init_db(database)
    mcp_server = create_mcp_server(database)
    server = create_stdio_server(mcp_server)

    logger.info(f"{mcp_server.name} started with tools: {mcp_server.list_tools()}")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=mcp_server.name,
                    server_version=config.SERVER_VERSION,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )
    finally:
        database.disconnect()


def main_sync() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
