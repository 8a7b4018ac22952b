"""Initialize database tables."""
import logging

from sqlmodel import SQLModel

from task_mcp.db.config import Database
from task_mcp.models import Tag, Task, User  # noqa: F401  (registers table metadata)

logger = logging.getLogger(__name__)


def init_db(database: Database) -> None:
    """Create all tables that do not exist yet."""
    logger.info("Creating all tables...")
    SQLModel.metadata.create_all(database.connect())
    logger.info("Tables created successfully.")


if __name__ == "__main__":
    from task_mcp.utils.logger import configure_logging

    configure_logging()
    db = Database()
    try:
        init_db(db)
    finally:
        db.disconnect()
