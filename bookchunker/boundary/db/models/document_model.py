"""
Document ORM model.

Represents one ingested e-book with its raw text and bibliographic fields.

Dependencies: sqlalchemy, bookchunker.boundary.db.base
System role: Source records read by the chunking service
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookchunker.boundary.db.base import Base, TimestampMixin


class DocumentModel(Base, TimestampMixin):
    """
    Document ORM model holding a raw Gutenberg text.

    The chunking service only reads documents. Identifiers are integers,
    either supplied by the caller or assigned by the store on insert.

    Attributes:
        id: Integer primary key
        name: Book title, or the archive entry name when no title was found
        author: Book author (may be empty)
        filename: Archive entry name (may be empty)
        content: Full raw text with header and footer boilerplate intact

    Relationships:
        chunks: ChunkModel rows derived from this document
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    author: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    filename: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        doc="Raw document text",
    )

    # Relationships
    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        order_by="ChunkModel.id",
        passive_deletes=True,
    )
