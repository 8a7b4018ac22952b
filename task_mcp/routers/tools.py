"""HTTP router exposing the MCP tools."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from task_mcp.mcp.server import MCPServer

router = APIRouter(tags=["Tools"])


def get_mcp_server(request: Request) -> MCPServer:
    """Dependency returning the registry built at startup."""
    mcp_server = getattr(request.app.state, "mcp_server", None)
    if mcp_server is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="MCP server is not initialized"
        )
    return mcp_server


@router.get("/tools", response_model=Dict[str, Any])
async def list_tools(mcp_server: MCPServer = Depends(get_mcp_server)):
    """JSON schemas of every registered tool."""
    return {"tools": list(mcp_server.get_tool_schemas().values())}


@router.post("/tools/{tool_name}", response_model=Dict[str, Any])
async def invoke_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    mcp_server: MCPServer = Depends(get_mcp_server),
):
    """Invoke a tool; the body is the tool's argument object, the reply its envelope."""
    if tool_name not in mcp_server.tools:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tool: {tool_name}"
        )
    return await mcp_server.invoke_tool(tool_name, arguments or {})
