"""Routers package for the task MCP HTTP surface."""

from .tools import router as tools_router

__all__ = ["tools_router"]
