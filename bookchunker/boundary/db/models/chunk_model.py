"""
Chunk ORM model.

Represents one accepted paragraph of a document body.

Dependencies: sqlalchemy, bookchunker.boundary.db.base
System role: Persisted output of the chunking service
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookchunker.boundary.db.base import Base, TimestampMixin


class ChunkModel(Base, TimestampMixin):
    """
    Chunk ORM model.

    Rows are insert-only. Chunks of one document are written in paragraph
    order within one transaction; ascending id is the only ordering kept.

    Attributes:
        id: Store-assigned integer primary key
        text: Paragraph text, each line followed by a newline
        source_id: Foreign key to DocumentModel

    Relationships:
        document: Source DocumentModel (back_populates=chunks)

    Constraints:
        source_id: Foreign key ON DELETE CASCADE to documents.id
    """

    __tablename__ = "chunks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    text: Mapped[str] = mapped_column(Text, nullable=False)

    source_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    document = relationship("DocumentModel", back_populates="chunks")
