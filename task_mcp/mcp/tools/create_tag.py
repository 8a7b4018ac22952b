"""
Create Tag MCP Tool

Creates one or more tags and appends their ids to the user's tag list.
"""

from typing import Dict, Any

from task_mcp.db.config import Database
from task_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from task_mcp.schemas.tag import TagBatch
from task_mcp.services.tag_service import TagService


class CreateTagTool(BaseMCPTool):
    """MCP Tool for creating tags"""

    name = "create_tag"

    async def execute(self, **arguments) -> Dict[str, Any]:
        """
        Create tags for the user

        Args:
            userID: Owner of the tags
            tags: Non-empty list of ``{"text", "color"}`` objects

        Returns:
            ``{"count": n}`` with the number of tags created
        """
        user_id = arguments.get("userID")
        self.log_tool_invocation(user_id, {"tags": arguments.get("tags")})
        self.validate_user_id(user_id)

        batch = self.parse(TagBatch, arguments)

        with self.database.session() as session:
            count = TagService(session).create_tags(batch.tags, user_id)

        return create_success_response(data={"count": count}, message=f"Created {count} tag(s)")


def register_create_tag_tool(mcp_server, database: Database):
    """Register create_tag tool with MCP server"""
    from task_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name="create_tag",
        description="Create one or more tags",
        parameters={
            "type": "object",
            "properties": {
                "userID": {"type": "string", "description": "User ID"},
                "tags": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "text": {"type": "string", "description": "Tag text"},
                            "color": {"type": "string", "description": "Tag color (e.g. #FF5733)"}
                        },
                        "required": ["text", "color"]
                    },
                    "description": "Tags to create, each with text and color"
                }
            },
            "required": ["userID", "tags"]
        },
        handler=lambda **kwargs: CreateTagTool(database).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
