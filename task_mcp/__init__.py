"""Task and tag management tools for agents, served over MCP."""

__version__ = "1.0.0"
