"""
Create Task MCP Tool

Creates a new pending task for the user.
"""

from typing import Dict, Any

from task_mcp.db.config import Database
from task_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from task_mcp.schemas.task import TaskCreate, TaskRead
from task_mcp.services.task_service import TaskService


class CreateTaskTool(BaseMCPTool):
    """MCP Tool for creating tasks"""

    name = "create_task"

    async def execute(self, **arguments) -> Dict[str, Any]:
        """
        Create a new task

        Args:
            userID: Owner of the task
            title: Task title
            description: Optional task description
            priority: Optional priority 1-5 (default 3)
            endAt: Optional due date (ISO 8601)
            favorite: Optional, default false
            needTips: Optional, default false
            tags: Optional list of tag ids

        Returns:
            Created task object
        """
        user_id = arguments.get("userID")
        self.log_tool_invocation(user_id, {"title": arguments.get("title")})
        self.validate_user_id(user_id)

        data = self.parse(TaskCreate, arguments)

        with self.database.session() as session:
            task = TaskService(session).create_task(data, user_id)
            payload = TaskRead.serialize(task)

        return create_success_response(data=payload, message=f"Task '{payload['title']}' created")


def register_create_task_tool(mcp_server, database: Database):
    """Register create_task tool with MCP server"""
    from task_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name="create_task",
        description="Create a new task",
        parameters={
            "type": "object",
            "properties": {
                "userID": {"type": "string", "description": "User ID"},
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string", "description": "Task description (optional)"},
                "priority": {"type": "number", "description": "Task priority (1-5, default 3)"},
                "endAt": {"type": "string", "description": "Due date (ISO 8601, optional)"},
                "favorite": {"type": "boolean", "description": "Mark as favorite (default false)"},
                "needTips": {"type": "boolean", "description": "Needs a reminder (default false)"},
                "tags": {"type": "array", "items": {"type": "string"}, "description": "Tag ids (optional)"}
            },
            "required": ["userID", "title"]
        },
        handler=lambda **kwargs: CreateTaskTool(database).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
