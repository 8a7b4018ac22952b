"""
Delete Task MCP Tool

Permanently deletes one task or a batch of tasks. Ids that match nothing
for the user are skipped; a zero count is still a success.
"""

from typing import Dict, Any

from task_mcp.db.config import Database
from task_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from task_mcp.schemas.task import TaskDelete
from task_mcp.services.task_service import TaskService


class DeleteTaskTool(BaseMCPTool):
    """MCP Tool for deleting tasks"""

    name = "delete_task"

    async def execute(self, **arguments) -> Dict[str, Any]:
        """
        Delete tasks permanently

        Args:
            id: Task id or list of task ids
            userID: Owner of the tasks

        Returns:
            ``{"count": n}`` with the number of deleted tasks
        """
        user_id = arguments.get("userID")
        self.log_tool_invocation(user_id, {"id": arguments.get("id")})
        self.validate_user_id(user_id)

        request = self.parse(TaskDelete, arguments)

        with self.database.session() as session:
            count = TaskService(session).delete_tasks(request.ids, user_id)

        return create_success_response(data={"count": count}, message=f"Deleted {count} task(s)")


def register_delete_task_tool(mcp_server, database: Database):
    """Register delete_task tool with MCP server"""
    from task_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name="delete_task",
        description="Delete a task or a batch of tasks",
        parameters={
            "type": "object",
            "properties": {
                "id": {
                    "oneOf": [
                        {"type": "string"},
                        {"type": "array", "items": {"type": "string"}}
                    ],
                    "description": "Task ID or array of task IDs"
                },
                "userID": {"type": "string", "description": "User ID"}
            },
            "required": ["id", "userID"]
        },
        handler=lambda **kwargs: DeleteTaskTool(database).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
