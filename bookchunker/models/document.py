"""
Document domain models.

Read-only view of a stored document and the archive entry it came from.

Dependencies: pydantic
System role: Document data structures shared across layers
"""

from pydantic import BaseModel, ConfigDict, Field


class DocumentRecord(BaseModel):
    """Stored e-book text with its bibliographic fields."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int = Field(description="Externally assigned document identifier")
    name: str = Field(default="", description="Book title or archive entry name")
    author: str = Field(default="", description="Book author")
    filename: str = Field(default="", description="Archive entry name")
    content: str = Field(default="", description="Full raw text, boilerplate included")


class ArchiveEntry(BaseModel):
    """Text entry read out of a corpus archive."""

    archive_path: str = Field(description="Path of the containing archive")
    filename: str = Field(description="Entry name inside the archive")
    content: str = Field(description="Decoded entry text")
