"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from bookchunker.boundary.db.CRUD import document_crud, chunk_crud

    with SessionFactory() as session, session.begin():
        document = document_crud.get_by_id(session, document_id)
        chunk_crud.create(session, source_id=document.id, text=paragraph)
"""

from bookchunker.boundary.db.CRUD.base_crud import BaseCRUD
from bookchunker.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from bookchunker.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "BaseCRUD",
    "DocumentCRUD",
    "document_crud",
    "ChunkCRUD",
    "chunk_crud",
]
