"""Environment configuration for the task MCP server."""
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./task_mcp.db")
SQL_ECHO = os.environ.get("SQL_ECHO", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Conditional-write retries when two tag creations race on the same user row
TAG_APPEND_MAX_RETRIES = int(os.environ.get("TAG_APPEND_MAX_RETRIES", "5"))

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

SERVER_NAME = "task-mcp-server"
SERVER_VERSION = "1.0.0"
