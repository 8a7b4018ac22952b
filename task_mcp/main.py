"""FastAPI application exposing the task MCP tools over HTTP."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from task_mcp import config
from task_mcp.db.config import Database
from task_mcp.db.init import init_db
from task_mcp.mcp.server import create_mcp_server
from task_mcp.routers import tools_router
from task_mcp.utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    """Build the app; the database handle is connected on startup and disposed on shutdown."""
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize database and MCP server on startup; dispose the engine on shutdown."""
        init_db(database)
        app.state.mcp_server = create_mcp_server(database)
        logger.info(f"MCP Server initialized with tools: {app.state.mcp_server.list_tools()}")
        try:
            yield
        finally:
            app.state.mcp_server = None
            database.disconnect()

    app = FastAPI(
        title="Task MCP Server",
        description="Task and tag tools for agents, over HTTP",
        version=config.SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.mcp_server = None

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": config.SERVER_VERSION}

    @app.get("/")
    async def root():
        """Root endpoint - API welcome message."""
        return {
            "message": "Task MCP Server",
            "version": config.SERVER_VERSION,
            "docs": "/docs",
            "health": "/health",
            "tools": "/tools",
        }

    app.include_router(tools_router)
    return app


app = create_app()


def run():
    """Console-script entry point."""
    import uvicorn

    configure_logging()
    uvicorn.run("task_mcp.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
