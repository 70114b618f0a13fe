"""
Chunk CRUD operations.

Provides insert and per-document read operations for ChunkModel.

Dependencies: sqlalchemy, bookchunker.boundary.db.models.chunk_model
System role: Chunk persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookchunker.boundary.db.CRUD.base_crud import BaseCRUD
from bookchunker.boundary.db.models.chunk_model import ChunkModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """
    CRUD operations for ChunkModel.

    Extends BaseCRUD with queries scoped to one source document.
    """

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    def get_by_source_id(
        self,
        session: Session,
        source_id: int,
        limit: int | None = None,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve chunks of one document in insertion order.

        Args:
            session: Database session
            source_id: Source document id
            limit: Maximum number of chunks to return

        Returns:
            Sequence of ChunkModels belonging to the document
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.source_id == source_id)
            .order_by(ChunkModel.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = session.execute(stmt)
        return result.scalars().all()

    def count_by_source_id(self, session: Session, source_id: int) -> int:
        """
        Count chunks of one document.

        Args:
            session: Database session
            source_id: Source document id

        Returns:
            Number of chunk rows referencing the document
        """
        stmt = (
            select(func.count())
            .select_from(ChunkModel)
            .where(ChunkModel.source_id == source_id)
        )
        return session.execute(stmt).scalar_one()


chunk_crud = ChunkCRUD()
