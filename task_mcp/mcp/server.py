"""
MCP Server Implementation

Tool registry and dispatcher shared by the stdio transport and the HTTP
surface. Every invocation comes back as a ``{success, message, data}``
envelope; failures raised by the services are converted here.
"""

from typing import Dict, Any, Callable, Optional
from dataclasses import dataclass
import logging

from task_mcp import config
from task_mcp.db.config import Database
from task_mcp.mcp.base_tool import create_error_response

logger = logging.getLogger(__name__)


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable


class MCPServer:
    """
    MCP Server for Task Management

    Provides tools that agents can invoke to interact with the system.
    All tools are scoped by userID.
    """

    def __init__(self, name: str = config.SERVER_NAME):
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise ValueError(f"Unknown tool: {name}. Available tools: {list(self.tools.keys())}")
        return self.tools[name]

    def list_tools(self) -> list[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def invoke_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Invoke a tool and wrap the outcome in the response envelope

        Args:
            tool_name: Name of the tool to invoke
            arguments: Tool arguments (must include userID)

        Returns:
            ``{"success": True, ...}`` from the tool, or
            ``{"success": False, "message": <error>, "data": None}``
        """
        arguments = arguments or {}

        try:
            tool = self.get_tool(tool_name)
            logger.info(f"Invoking MCP tool: {tool_name} for user: {arguments.get('userID')}")
            result = await tool.handler(**arguments)
            logger.info(f"Tool {tool_name} executed successfully")
            return result
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {str(e)}")
            return create_error_response(str(e))

    def get_tool_schemas(self) -> Dict[str, Dict[str, Any]]:
        """Get JSON schemas for all registered tools"""
        return {
            name: {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters
            }
            for name, tool in self.tools.items()
        }


def create_mcp_server(database: Database) -> MCPServer:
    """Build a server with every task and tag tool bound to ``database``."""
    from task_mcp.mcp.tools.create_tag import register_create_tag_tool
    from task_mcp.mcp.tools.create_task import register_create_task_tool
    from task_mcp.mcp.tools.delete_task import register_delete_task_tool
    from task_mcp.mcp.tools.get_tasks import register_get_tasks_tool
    from task_mcp.mcp.tools.update_task import register_update_task_tool

    server = MCPServer()
    register_create_task_tool(server, database)
    register_get_tasks_tool(server, database)
    register_update_task_tool(server, database)
    register_delete_task_tool(server, database)
    register_create_tag_tool(server, database)
    return server
