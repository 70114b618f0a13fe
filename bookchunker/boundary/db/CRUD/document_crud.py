"""
Document CRUD operations.

Provides Create and Read operations for DocumentModel with the
identifier listing used by batch orchestration.

Dependencies: sqlalchemy, bookchunker.boundary.db.models.document_model
System role: Document persistence operations
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookchunker.boundary.db.CRUD.base_crud import BaseCRUD
from bookchunker.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel."""

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    def list_ids(self, session: Session) -> list[int]:
        """
        List every stored document identifier.

        Args:
            session: Database session

        Returns:
            list[int]: Document ids in ascending order
        """
        stmt = select(DocumentModel.id).order_by(DocumentModel.id)
        result = session.execute(stmt)
        return list(result.scalars().all())


document_crud = DocumentCRUD()
