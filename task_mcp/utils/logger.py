"""
Logging setup for the task MCP server.

Every handler writes to stderr: stdout is reserved for the MCP stdio protocol.
"""

import logging
import sys
from typing import Optional

from task_mcp import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for an entry point."""
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
