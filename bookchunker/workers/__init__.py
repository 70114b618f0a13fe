"""
Celery workers module.

Distributes per-document chunking across worker processes.

Dependencies: celery, bookchunker.configs
System role: Background task processing
"""

from celery import Celery

from bookchunker.configs import get_settings

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "bookchunker",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=["bookchunker.workers.tasks.document_chunking"],
)

celery_app.conf.update(
    task_serializer=celery_config.task_serializer,
    result_serializer=celery_config.result_serializer,
    accept_content=celery_config.accept_content,
    timezone=celery_config.timezone,
)
