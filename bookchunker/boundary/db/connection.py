"""
Database connection management.

Provides SQLAlchemy engine and session factory for the document/chunk store.

Dependencies: sqlalchemy, bookchunker.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from bookchunker.configs import DatabaseSettings, get_settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_config: DatabaseSettings | None = None) -> Engine:
    """
    Create SQLAlchemy engine for the configured store.

    Server databases get a QueuePool with pre-ping health checks. SQLite
    connections get foreign key enforcement switched on, which SQLite
    leaves off by default.

    Args:
        db_config: Database settings (uses application settings if None)

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    """
    db_config = db_config or get_settings().database

    if db_config.is_sqlite:
        engine = create_engine(db_config.url, echo=db_config.echo_sql)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        db_config.url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,  # Verify connections before using
    )


def get_session_factory(engine: Engine | None = None) -> sessionmaker:
    """
    Create session factory for database operations.

    Returns sessionmaker with autoflush=False and expire_on_commit=False for
    explicit transaction control and predictable behavior.

    Args:
        engine: Engine to bind (creates one from settings if None)

    Returns:
        sessionmaker: Session factory configured for manual transaction control

    Usage:
        SessionFactory = get_session_factory()
        with SessionFactory() as session, session.begin():
            session.add(obj)
        # committed on success, rolled back on any exception
    """
    engine = engine or get_engine()
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
