"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from bookchunker.configs.chunking import ChunkingSettings
from bookchunker.configs.database import DatabaseSettings
from bookchunker.configs.ingestion import IngestionSettings
from bookchunker.configs.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "ChunkingSettings",
    "DatabaseSettings",
    "IngestionSettings",
]
