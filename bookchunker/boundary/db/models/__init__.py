"""
Database models package.

Exports:
  - DocumentModel: Raw e-book text records
  - ChunkModel: Paragraph chunks derived from documents

Dependencies: sqlalchemy, bookchunker.boundary.db.base
System role: Database model definitions for domain entities
"""

from bookchunker.boundary.db.models.chunk_model import ChunkModel
from bookchunker.boundary.db.models.document_model import DocumentModel

__all__ = [
    "DocumentModel",
    "ChunkModel",
]
