"""
Document chunking Celery task.

Task: chunk_document_task(document_id)
Flow: read document -> chunk -> insert -> commit (one transaction per task)

Each task owns an independent transaction, so tasks for different documents
may run in parallel. Retries re-run the whole transaction after a rollback.

Dependencies: celery, bookchunker.application, bookchunker.boundary
System role: Parallel execution of the per-document unit of work
"""

import logging

from sqlalchemy.orm import sessionmaker

from bookchunker.application.services.chunking_service import ChunkingService
from bookchunker.boundary.db.connection import get_session_factory
from bookchunker.boundary.db.CRUD.document_crud import document_crud
from bookchunker.core.exceptions import DocumentNotFoundError, StoreError
from bookchunker.workers import celery_app, celery_config

logger = logging.getLogger(__name__)


@celery_app.task(
    bind=True,
    name="bookchunker.chunk_document",
    max_retries=celery_config.task_max_retries,
    autoretry_for=(StoreError,),
    retry_backoff=celery_config.task_retry_backoff,
    retry_backoff_max=celery_config.task_retry_backoff_max,
)
def chunk_document_task(self, document_id: int) -> dict:
    """
    Chunk one document.

    Args:
        document_id: Stored document id

    Returns:
        dict: Task outcome with status and chunk count
    """
    service = ChunkingService()
    try:
        result = service.chunk_document(document_id)
    except DocumentNotFoundError:
        logger.warning(
            f"{__name__}:chunk_document_task - Document not found, not retrying",
            extra={"document_id": document_id},
        )
        return {"document_id": document_id, "status": "not_found", "chunk_count": 0}

    return {
        "document_id": document_id,
        "status": "completed",
        "chunk_count": result.chunk_count,
    }


def enqueue_all_documents(session_factory: sessionmaker | None = None) -> int:
    """
    Dispatch one chunking task per stored document.

    Args:
        session_factory: Session factory for listing documents (created if None)

    Returns:
        int: Number of tasks dispatched
    """
    session_factory = session_factory or get_session_factory()
    with session_factory() as session:
        document_ids = document_crud.list_ids(session)

    for document_id in document_ids:
        chunk_document_task.delay(document_id)

    logger.info(f"{__name__}:enqueue_all_documents - Dispatched {len(document_ids)} tasks")
    return len(document_ids)
