"""
Celery task modules.

Exports: chunk_document_task, enqueue_all_documents
"""

from bookchunker.workers.tasks.document_chunking import (
    chunk_document_task,
    enqueue_all_documents,
)

__all__ = ["chunk_document_task", "enqueue_all_documents"]
