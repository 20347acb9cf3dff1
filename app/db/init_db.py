"""
Database initialization.

Creates all tables.
"""

from loguru import logger
from sqlmodel import SQLModel

from app.db.session import engine


def init_db() -> None:
    """
    Initialize database schema.

    Creates all SQLModel tables that do not exist yet.  Alembic remains
    the way to evolve an existing schema.
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
