"""
Get Tasks MCP Tool

Lists the user's tasks, newest first, with optional filters.
"""

from typing import Dict, Any

from task_mcp.db.config import Database
from task_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from task_mcp.schemas.task import TaskFilter, TaskRead
from task_mcp.services.task_service import TaskService

DATE_RANGE_PROPERTIES = {
    f"{column}{bound}": {
        "type": "string",
        "description": f"{column} {'lower' if bound == 'Start' else 'upper'} bound, inclusive (ISO 8601)"
    }
    for column in ("endAt", "completedAt", "createdAt")
    for bound in ("Start", "End")
}


class GetTasksTool(BaseMCPTool):
    """MCP Tool for listing tasks with filters"""

    name = "get_tasks"

    async def execute(self, **arguments) -> Dict[str, Any]:
        """
        List tasks for the user

        Args:
            userID: Owner of the tasks
            Any TaskFilter field (title, status, endAtStart, ...)

        Returns:
            Array of task objects ordered by createdAt descending
        """
        user_id = arguments.get("userID")
        self.log_tool_invocation(user_id, {k: v for k, v in arguments.items() if k != "userID"})
        self.validate_user_id(user_id)

        filters = self.parse(TaskFilter, arguments)

        with self.database.session() as session:
            tasks = TaskService(session).list_tasks(user_id, filters)
            payload = [TaskRead.serialize(task) for task in tasks]

        count = len(payload)
        return create_success_response(
            data=payload,
            message=f"Found {count} task{'s' if count != 1 else ''}"
        )


def register_get_tasks_tool(mcp_server, database: Database):
    """Register get_tasks tool with MCP server"""
    from task_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name="get_tasks",
        description="List tasks, newest first, with optional filters",
        parameters={
            "type": "object",
            "properties": {
                "userID": {"type": "string", "description": "User ID"},
                "title": {"type": "string", "description": "Substring of the title"},
                "description": {"type": "string", "description": "Substring of the description"},
                "searchText": {"type": "string", "description": "Substring of title or description"},
                "status": {
                    "type": "string",
                    "enum": ["pending", "in-progress", "completed"],
                    "description": "Task status"
                },
                "priority": {"type": "number", "description": "Exact priority"},
                "favorite": {"type": "boolean", "description": "Only favorites (true) or non-favorites (false)"},
                "needTips": {"type": "boolean", "description": "Filter on the reminder flag"},
                **DATE_RANGE_PROPERTIES,
                "pageSize": {"type": "number", "description": "Page size (optional, all rows when omitted)"},
                "pageNum": {"type": "number", "description": "Page number (default 1)"}
            },
            "required": ["userID"]
        },
        handler=lambda **kwargs: GetTasksTool(database).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
