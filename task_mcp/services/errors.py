"""
Typed failures raised by the task and tag services.

The services never build user-facing envelopes; the tool dispatcher turns
these into ``{"success": False, "message": ..., "data": None}``.
"""

from typing import Any, Dict, Optional


class TaskMCPError(Exception):
    """Base exception for service failures"""
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TaskMCPError):
    """Missing or malformed input."""
    code = "VALIDATION_ERROR"


class NotFoundError(TaskMCPError):
    """No record matches the requested id under the given owner."""
    code = "NOT_FOUND"


class StoreError(TaskMCPError):
    """The underlying store operation failed."""
    code = "STORE_ERROR"


def require_user_id(user_id: Any) -> str:
    """Return ``user_id`` if it is a non-empty string, else raise ValidationError."""
    if not user_id or not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError("Invalid or missing userID", details={"field": "userID"})
    return user_id
