"""
Result models for chunking, batch and ingestion runs.

Dependencies: pydantic
System role: Return types of application services
"""

from pydantic import BaseModel, Field


class ChunkingResult(BaseModel):
    """Outcome of chunking one document."""

    document_id: int = Field(description="Chunked document identifier")
    chunk_count: int = Field(description="Number of chunks committed")
    processing_time_ms: float = Field(description="Wall time of the transaction in milliseconds")


class DocumentFailure(BaseModel):
    """A document that failed during a batch run."""

    document_id: int
    error_type: str
    message: str


class BatchResult(BaseModel):
    """Summary of a batch chunking run."""

    total: int = Field(default=0, description="Documents attempted")
    succeeded: int = Field(default=0, description="Documents committed")
    chunk_count: int = Field(default=0, description="Chunks committed across all documents")
    failures: list[DocumentFailure] = Field(default_factory=list)

    @property
    def failed(self) -> int:
        """Number of documents rolled back."""
        return len(self.failures)


class IngestionResult(BaseModel):
    """Summary of an archive ingestion run."""

    archives_scanned: int = Field(default=0, description="Archives opened")
    documents_created: int = Field(default=0, description="Documents stored")
    archives_without_text: int = Field(
        default=0,
        description="Archives whose first entry was not a text file",
    )
    failed_archives: list[str] = Field(default_factory=list, description="Unreadable archive paths")
