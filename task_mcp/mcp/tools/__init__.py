"""Task and tag tools registered by ``create_mcp_server``."""
