"""Database handle for the task MCP server."""
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from task_mcp import config

logger = logging.getLogger(__name__)


class Database:
    """
    Explicitly constructed store handle.

    The hosting process owns the lifecycle: call ``connect()`` before handing
    the handle to tools and ``disconnect()`` on shutdown.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or config.DATABASE_URL
        self.echo = config.SQL_ECHO if echo is None else echo
        self._engine: Optional[Engine] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._engine

    def connect(self) -> Engine:
        """Create the engine if it does not exist yet."""
        if self._engine is not None:
            return self._engine

        if self.is_sqlite:
            logger.info(f"Using SQLite database: {self.url}")
            engine = create_engine(
                self.url, echo=self.echo, connect_args={"check_same_thread": False}
            )

            @event.listens_for(engine, "connect")
            def set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.close()
        else:
            logger.info("Using PostgreSQL/other database backend")
            engine = create_engine(self.url, echo=self.echo, pool_pre_ping=True)

        self._engine = engine
        return engine

    def disconnect(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("Database connection pool disposed")

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Open a session bound to this handle's engine."""
        with Session(self.engine) as session:
            yield session
