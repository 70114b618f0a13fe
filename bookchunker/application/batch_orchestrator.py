"""
Batch chunking orchestrator.

Runs the chunking service over every stored document, one transaction per
document, logging failures and moving on.

Dependencies: bookchunker.application.services, bookchunker.boundary.db
System role: Outer batch loop over the document store
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from bookchunker.application.services.chunking_service import ChunkingService
from bookchunker.boundary.db.connection import get_session_factory
from bookchunker.boundary.db.CRUD.document_crud import document_crud
from bookchunker.configs import get_settings
from bookchunker.core.exceptions import BookChunkerException, StoreError
from bookchunker.models.results import BatchResult, DocumentFailure
from bookchunker.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)


class BatchChunkingOrchestrator:
    """Chunk many documents sequentially with per-document isolation."""

    def __init__(
        self,
        session_factory: sessionmaker | None = None,
        chunking_service: ChunkingService | None = None,
        stop_on_error: bool | None = None,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            session_factory: Session factory for listing documents (created if None)
            chunking_service: Per-document service (shares session_factory if None)
            stop_on_error: Re-raise the first failure (uses settings if None)
        """
        self._session_factory = session_factory or get_session_factory()
        self._chunking_service = chunking_service or ChunkingService(self._session_factory)
        if stop_on_error is None:
            stop_on_error = get_settings().chunking.stop_on_error
        self._stop_on_error = stop_on_error

    def list_document_ids(self) -> list[int]:
        """
        List all stored document ids.

        Returns:
            list[int]: Document ids in ascending order

        Raises:
            StoreError: Listing query failed
        """
        try:
            with self._session_factory() as session:
                return document_crud.list_ids(session)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list documents: {e}", operation="list_ids") from e

    def run(self, document_ids: Sequence[int] | None = None) -> BatchResult:
        """
        Chunk the given documents, or every stored document.

        Args:
            document_ids: Ids to process (all stored documents if None)

        Returns:
            BatchResult: Per-run totals and failed document ids

        Raises:
            BookChunkerException: First failure, only when stop_on_error is set
        """
        ids = list(document_ids) if document_ids is not None else self.list_document_ids()
        total = len(ids)
        result = BatchResult(total=total)

        for index, document_id in enumerate(ids):
            log_with_context(
                logger,
                logging.INFO,
                f"{__name__}:run - {index} of {total}",
                document_id=document_id,
            )
            try:
                outcome = self._chunking_service.chunk_document(document_id)
            except BookChunkerException as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:run - Document {document_id} failed",
                    e,
                    document_id=document_id,
                )
                result.failures.append(
                    DocumentFailure(
                        document_id=document_id,
                        error_type=type(e).__name__,
                        message=e.message,
                    )
                )
                if self._stop_on_error:
                    raise
                continue

            result.succeeded += 1
            result.chunk_count += outcome.chunk_count

        logger.info(
            f"{__name__}:run - Finished: {result.succeeded} succeeded, "
            f"{result.failed} failed, {result.chunk_count} chunks"
        )
        return result
