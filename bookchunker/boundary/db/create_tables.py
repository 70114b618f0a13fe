"""
Database table creation script.

Creates the documents and chunks tables using SQLAlchemy metadata.

Dependencies: sqlalchemy, bookchunker.configs
System role: Database schema initialization

Usage:
    python -m bookchunker.boundary.db.create_tables
"""

import logging

from sqlalchemy.engine import Engine

from bookchunker.boundary.db.base import Base
from bookchunker.boundary.db.connection import get_engine

# Import all models to register them with Base.metadata
from bookchunker.boundary.db.models.chunk_model import ChunkModel  # noqa: F401
from bookchunker.boundary.db.models.document_model import DocumentModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables(engine: Engine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Target engine (created from settings if None)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info(f"{__name__}:create_all_tables - Tables created: {sorted(Base.metadata.tables)}")


def drop_all_tables(engine: Engine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Target engine (created from settings if None)

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.info(f"{__name__}:drop_all_tables - All tables dropped")


if __name__ == "__main__":
    from bookchunker.observability.logger import configure_logging

    configure_logging()
    create_all_tables()
