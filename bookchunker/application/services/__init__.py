"""
Application services.

Exports: ChunkingService, IngestionService
"""

from bookchunker.application.services.chunking_service import ChunkingService
from bookchunker.application.services.ingestion_service import IngestionService

__all__ = ["ChunkingService", "IngestionService"]
