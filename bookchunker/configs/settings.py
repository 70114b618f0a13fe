"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from bookchunker.configs.base import BaseSettings
from bookchunker.configs.celery_config import CelerySettings
from bookchunker.configs.chunking import ChunkingSettings
from bookchunker.configs.database import DatabaseSettings
from bookchunker.configs.ingestion import IngestionSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    chunking: ChunkingSettings = ChunkingSettings()
    ingestion: IngestionSettings = IngestionSettings()
    celery: CelerySettings = CelerySettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for the lifetime of the process.
    Environment variables loaded once at first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from bookchunker.configs import get_settings
        settings = get_settings()
    """
    return Settings()
