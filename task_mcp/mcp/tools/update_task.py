"""
Update Task MCP Tool

Updates an existing task. Changing ``status`` drives ``completedAt``:
completing stamps it, any other status clears it.
"""

from typing import Dict, Any

from task_mcp.db.config import Database
from task_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from task_mcp.schemas.task import TaskRead, TaskUpdate
from task_mcp.services.errors import ValidationError
from task_mcp.services.task_service import TaskService


class UpdateTaskTool(BaseMCPTool):
    """MCP Tool for updating tasks"""

    name = "update_task"

    async def execute(self, **arguments) -> Dict[str, Any]:
        """
        Update an existing task

        Args:
            id: ID of task to update
            userID: Owner of the task
            title, description, status, priority, endAt, favorite,
            needTips, tags, completedAt: Any subset of fields to change

        Returns:
            Updated task object
        """
        user_id = arguments.get("userID")
        task_id = arguments.get("id")
        self.log_tool_invocation(user_id, {"id": task_id, "fields": sorted(arguments)})
        self.validate_user_id(user_id)

        if not task_id or not isinstance(task_id, str):
            raise ValidationError("Task id is required", details={"field": "id"})

        patch = self.parse(TaskUpdate, arguments)

        with self.database.session() as session:
            task = TaskService(session).update_task(task_id, user_id, patch)
            payload = TaskRead.serialize(task)

        return create_success_response(data=payload, message=f"Task '{payload['title']}' updated")


def register_update_task_tool(mcp_server, database: Database):
    """Register update_task tool with MCP server"""
    from task_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name="update_task",
        description="Update task fields; setting status drives completedAt",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "Task ID"},
                "userID": {"type": "string", "description": "User ID"},
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string", "description": "Task description"},
                "status": {
                    "type": "string",
                    "enum": ["pending", "in-progress", "completed"],
                    "description": "Task status"
                },
                "priority": {"type": "number", "description": "Task priority (1-5)"},
                "endAt": {"type": "string", "description": "Due date (ISO 8601)"},
                "favorite": {"type": "boolean", "description": "Favorite flag"},
                "needTips": {"type": "boolean", "description": "Reminder flag"},
                "tags": {"type": "array", "items": {"type": "string"}, "description": "Tag ids"},
                "completedAt": {
                    "type": "string",
                    "description": "Completion time (ISO 8601); only applied together with status completed"
                }
            },
            "required": ["id", "userID"]
        },
        handler=lambda **kwargs: UpdateTaskTool(database).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
