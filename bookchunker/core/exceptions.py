"""
Exception hierarchy for bookchunker.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BookChunkerException(Exception):
    """Base exception for all bookchunker errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(BookChunkerException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(BookChunkerException):
    """Raised when a document identifier does not resolve to a stored document."""

    def __init__(self, document_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize document not found error.

        Args:
            document_id: ID of the missing document
            details: Additional context
        """
        self.document_id = document_id
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class StoreError(BookChunkerException):
    """Raised when a read or write against the document/chunk store fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        document_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Operation that failed (read, insert, commit)
            document_id: Document being processed when the store failed
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if document_id is not None:
            details["document_id"] = document_id
        super().__init__(message, details)


class ChunkingCancelledError(BookChunkerException):
    """Raised when an orchestrator aborts chunking of a document."""

    def __init__(self, document_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize cancellation error.

        Args:
            document_id: ID of the document whose chunking was aborted
            details: Additional context
        """
        self.document_id = document_id
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Chunking cancelled for document {document_id}", details)


class ArchiveError(BookChunkerException):
    """Raised when a corpus archive cannot be opened or read."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize archive error.

        Args:
            message: Error message
            path: Archive path that failed
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)
