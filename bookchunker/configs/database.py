"""
Database configuration settings.

Manages the document/chunk store connection parameters for SQLAlchemy.
SQLite is the default store; pool settings apply to server databases only.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bookchunker.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Document/chunk store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite:///chunker.db",
        description="SQLAlchemy database URL",
    )

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL points at a SQLite database."""
        return self.url.startswith("sqlite")
