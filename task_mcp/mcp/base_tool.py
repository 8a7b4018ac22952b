"""
MCP Base Tool Interface

Provides base functionality for all MCP tools including:
- userID validation
- Argument parsing into schemas
- Audit logging
- Response envelopes
"""

from typing import Any, Dict, Optional, Type, TypeVar
from abc import ABC, abstractmethod
import json
import logging

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from task_mcp.db.config import Database
from task_mcp.services.errors import ValidationError, require_user_id

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("task_mcp.audit")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class BaseMCPTool(ABC):
    """
    Base class for all MCP tools

    Each invocation opens its own session from the injected ``Database``.
    """

    name: str = ""

    def __init__(self, database: Database):
        self.database = database

    def validate_user_id(self, user_id: Any) -> str:
        """
        Validate that userID is provided and non-empty

        Raises:
            ValidationError: If userID is missing or not a string
        """
        try:
            return require_user_id(user_id)
        except ValidationError:
            logger.error(f"MCP tool {self.name} called without valid userID")
            raise

    def parse(self, schema: Type[SchemaT], arguments: Dict[str, Any]) -> SchemaT:
        """Validate raw tool arguments against ``schema``."""
        try:
            return schema.model_validate(arguments)
        except SchemaValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'input'}: {error['msg']}"
                for error in exc.errors()
            )
            raise ValidationError(
                f"Invalid arguments for {self.name}: {problems}",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc

    def log_tool_invocation(self, user_id: Any, params: Dict[str, Any]) -> None:
        """Write one JSON audit line for this invocation."""
        record = {"tool": self.name, "user_id": user_id, "params": params}
        audit_logger.info(json.dumps(record, default=str))

    @abstractmethod
    async def execute(self, **kwargs) -> Dict[str, Any]:
        """
        Execute the tool logic

        Args:
            **kwargs: Tool arguments as sent by the agent (must include userID)

        Returns:
            Success envelope
        """
        pass


def create_error_response(message: str) -> Dict[str, Any]:
    """Failure envelope; ``data`` is always null."""
    return {
        "success": False,
        "message": message,
        "data": None,
    }


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """Success envelope."""
    return {
        "success": True,
        "message": message or "",
        "data": data,
    }
