"""
Transactional chunking service.

Reads one document, segments its body into paragraph chunks, and inserts
them inside a single transaction. Any failure rolls the whole document back.

Dependencies: sqlalchemy, bookchunker.boundary.db, bookchunker.core
System role: Per-document unit of work
"""

import logging
import threading
import time

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from bookchunker.boundary.db.connection import get_session_factory
from bookchunker.boundary.db.CRUD.chunk_crud import chunk_crud
from bookchunker.boundary.db.CRUD.document_crud import document_crud
from bookchunker.configs import ChunkingSettings, get_settings
from bookchunker.core.chunking import iter_chunks
from bookchunker.core.exceptions import (
    BookChunkerException,
    ChunkingCancelledError,
    DocumentNotFoundError,
    StoreError,
)
from bookchunker.models.document import DocumentRecord
from bookchunker.models.results import ChunkingResult
from bookchunker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ChunkingService:
    """
    Chunk documents into the chunk store, one transaction per document.

    Lifecycle of a call: Started -> Reading -> Chunking -> Inserting* ->
    Committed, or RolledBack from any failure. No state is carried between
    calls, so one instance may serve a whole batch.
    """

    def __init__(
        self,
        session_factory: sessionmaker | None = None,
        settings: ChunkingSettings | None = None,
    ) -> None:
        """
        Initialize chunking service.

        Args:
            session_factory: Session factory for the store (created from settings if None)
            settings: Chunking settings (uses application settings if None)
        """
        self._session_factory = session_factory
        self._settings = settings or get_settings().chunking

    @property
    def session_factory(self) -> sessionmaker:
        """Lazy-load session factory to avoid connecting before first use."""
        if self._session_factory is None:
            self._session_factory = get_session_factory()
        return self._session_factory

    def chunk_document(
        self,
        document_id: int,
        cancel_event: threading.Event | None = None,
    ) -> ChunkingResult:
        """
        Chunk one document and persist its chunks atomically.

        Re-running on the same document appends a second copy of its chunks.

        Args:
            document_id: Identifier of the stored document
            cancel_event: Optional event an orchestrator sets to abort the run

        Returns:
            ChunkingResult: Committed chunk count and timing

        Raises:
            DocumentNotFoundError: No document with this id
            StoreError: Any read, insert or commit against the store failed
            ChunkingCancelledError: cancel_event was set before commit
        """
        start_time = time.perf_counter()

        try:
            with self.session_factory() as session, session.begin():
                self._check_cancelled(cancel_event, document_id)

                document = document_crud.get_by_id(session, document_id)
                if document is None:
                    raise DocumentNotFoundError(document_id)
                record = DocumentRecord.model_validate(document)

                chunk_count = 0
                for text in iter_chunks(
                    record.content,
                    min_length=self._settings.min_chunk_length,
                    start_marker=self._settings.start_marker,
                    end_marker=self._settings.end_marker,
                ):
                    self._check_cancelled(cancel_event, document_id)
                    chunk_crud.create(session, source_id=record.id, text=text)
                    chunk_count += 1

                self._check_cancelled(cancel_event, document_id)

        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:chunk_document - Store failure, transaction rolled back",
                e,
                document_id=document_id,
            )
            raise StoreError(
                f"Store failure while chunking document {document_id}: {e}",
                operation="chunk_document",
                document_id=document_id,
            ) from e
        except BookChunkerException as e:
            logger.warning(
                f"{__name__}:chunk_document - {type(e).__name__}: {e}",
                extra={"document_id": document_id},
            )
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:chunk_document - Committed {chunk_count} chunks",
            extra={"document_id": document_id, "chunk_count": chunk_count},
        )

        return ChunkingResult(
            document_id=document_id,
            chunk_count=chunk_count,
            processing_time_ms=elapsed_ms,
        )

    @staticmethod
    def _check_cancelled(cancel_event: threading.Event | None, document_id: int) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise ChunkingCancelledError(document_id)
