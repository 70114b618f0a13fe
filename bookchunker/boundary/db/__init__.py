"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_engine(), get_session_factory(): Connection management
  - create_all_tables(), drop_all_tables(): Schema management
  - DocumentModel, ChunkModel: Core domain entities
  - document_crud, chunk_crud: CRUD operation singletons

Dependencies: sqlalchemy, bookchunker.configs
System role: Database adapter for the document and chunk store
"""

from bookchunker.boundary.db.base import Base, TimestampMixin
from bookchunker.boundary.db.connection import get_engine, get_session_factory
from bookchunker.boundary.db.create_tables import create_all_tables, drop_all_tables
from bookchunker.boundary.db.models.chunk_model import ChunkModel
from bookchunker.boundary.db.models.document_model import DocumentModel
from bookchunker.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    DocumentCRUD,
    chunk_crud,
    document_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "get_engine",
    "get_session_factory",
    # Schema
    "create_all_tables",
    "drop_all_tables",
    # Models
    "DocumentModel",
    "ChunkModel",
    # CRUD classes
    "BaseCRUD",
    "DocumentCRUD",
    "ChunkCRUD",
    # CRUD singletons
    "document_crud",
    "chunk_crud",
]
