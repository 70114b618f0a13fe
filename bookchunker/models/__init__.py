"""
Domain models.

Exports: DocumentRecord, ArchiveEntry, ChunkingResult, BatchResult,
DocumentFailure, IngestionResult
"""

from bookchunker.models.document import ArchiveEntry, DocumentRecord
from bookchunker.models.results import (
    BatchResult,
    ChunkingResult,
    DocumentFailure,
    IngestionResult,
)

__all__ = [
    "DocumentRecord",
    "ArchiveEntry",
    "ChunkingResult",
    "BatchResult",
    "DocumentFailure",
    "IngestionResult",
]
